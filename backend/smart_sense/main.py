import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI

from .settings import settings
from .state import AppState
from .routers import health
from .routers import writer
from .routers import productivity
from .routers import learning
from .routers import medical
from .routers import translate
from .routers import chat
from .routers import speech

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
	logging.basicConfig(
		level=level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)


def create_app(state_factory: Optional[Callable[[], AppState]] = None) -> FastAPI:
	factory = state_factory or AppState.create

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		configure_logging(settings.log_level)
		# A missing API key fails startup here
		state = factory()
		app.state.smart_sense = state
		logger.info("SmartSense ready (speech recognition supported: %s)", state.capture.supported)
		try:
			yield
		finally:
			await state.aclose()

	app = FastAPI(title="SmartSense AI API", lifespan=lifespan)
	app.include_router(health.router)
	app.include_router(writer.router)
	app.include_router(productivity.router)
	app.include_router(learning.router)
	app.include_router(medical.router)
	app.include_router(translate.router)
	app.include_router(chat.router)
	app.include_router(speech.router)
	return app


app = create_app()
