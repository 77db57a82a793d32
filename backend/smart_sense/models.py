from __future__ import annotations
from enum import Enum
from typing import Annotated, ClassVar, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints


class ResultShape(str, Enum):
	PLAIN = "plain"
	STRUCTURED = "structured"


class TaskKind(str, Enum):
	EXCUSE = "excuse"
	APOLOGY = "apology"
	EMAIL = "email"
	LETTER = "letter"
	SUMMARY = "summary"
	ROADMAP = "roadmap"
	MEDICAL_INFO = "medical-info"
	TRANSLATE = "translate"

	@property
	def shape(self) -> ResultShape:
		if self in (TaskKind.EXCUSE, TaskKind.APOLOGY):
			return ResultShape.STRUCTURED
		return ResultShape.PLAIN


class ExcuseMode(str, Enum):
	BELIEVABLE = "Believable"
	FUNNY = "Funny"
	URGENT = "Urgent"
	PROFESSIONAL = "Professional"


class ApologyTone(str, Enum):
	SINCERE = "Sincere"
	FORMAL = "Formal"
	CASUAL = "Casual"


class EmailTone(str, Enum):
	FORMAL = "Formal"
	CASUAL = "Casual"
	FRIENDLY = "Friendly"
	URGENT = "Urgent"


class LetterTone(str, Enum):
	FORMAL = "Formal"
	INFORMAL = "Informal"
	FRIENDLY = "Friendly"


class SummaryLength(str, Enum):
	SHORT = "Short"
	MEDIUM = "Medium"
	DETAILED = "Detailed"


class MedicalAudience(str, Enum):
	PATIENT = "Patient"
	STUDENT = "Student"


class Language(str, Enum):
	ENGLISH = "English"
	HINDI = "Hindi"
	TELUGU = "Telugu"
	URDU = "Urdu"
	TAMIL = "Tamil"
	KANNADA = "Kannada"
	SPANISH = "Spanish"
	FRENCH = "French"
	GERMAN = "German"
	JAPANESE = "Japanese"
	RUSSIAN = "Russian"

	@property
	def locale(self) -> str:
		return LANGUAGE_LOCALES[self]


# Speech locale per language; one entry per enumerated language
LANGUAGE_LOCALES: Dict[Language, str] = {
	Language.ENGLISH: "en-US",
	Language.HINDI: "hi-IN",
	Language.TELUGU: "te-IN",
	Language.URDU: "ur-PK",
	Language.TAMIL: "ta-IN",
	Language.KANNADA: "kn-IN",
	Language.SPANISH: "es-ES",
	Language.FRENCH: "fr-FR",
	Language.GERMAN: "de-DE",
	Language.JAPANESE: "ja-JP",
	Language.RUSSIAN: "ru-RU",
}

DEFAULT_LOCALE = LANGUAGE_LOCALES[Language.ENGLISH]


def language_for_locale(locale: str) -> Optional[Language]:
	for language, code in LANGUAGE_LOCALES.items():
		if code.lower() == locale.lower():
			return language
	return None


# Free-form input must carry text once surrounding whitespace is removed
InputText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# ============================================================================
# GENERATION REQUESTS
# ============================================================================

class GenerationRequest(BaseModel):
	"""Immutable form input for one generation; `task` selects the builder."""
	model_config = ConfigDict(frozen=True, populate_by_name=True)

	task: ClassVar[TaskKind]


class ExcuseRequest(GenerationRequest):
	task: ClassVar[TaskKind] = TaskKind.EXCUSE
	situation: InputText
	mode: ExcuseMode = ExcuseMode.BELIEVABLE


class ApologyRequest(GenerationRequest):
	task: ClassVar[TaskKind] = TaskKind.APOLOGY
	situation: InputText
	tone: ApologyTone = ApologyTone.SINCERE


class EmailRequest(GenerationRequest):
	task: ClassVar[TaskKind] = TaskKind.EMAIL
	to: InputText
	subject: InputText
	points: InputText
	tone: EmailTone = EmailTone.FORMAL


class LetterRequest(GenerationRequest):
	task: ClassVar[TaskKind] = TaskKind.LETTER
	to: InputText
	# "from" is a keyword, so the field is exposed under its alias
	sender: InputText = Field(alias="from")
	points: InputText
	tone: LetterTone = LetterTone.FORMAL


class SummaryRequest(GenerationRequest):
	task: ClassVar[TaskKind] = TaskKind.SUMMARY
	text: InputText
	length: SummaryLength = SummaryLength.MEDIUM


class RoadmapRequest(GenerationRequest):
	task: ClassVar[TaskKind] = TaskKind.ROADMAP
	topic: InputText


class MedicalInfoRequest(GenerationRequest):
	task: ClassVar[TaskKind] = TaskKind.MEDICAL_INFO
	condition: InputText
	audience: MedicalAudience = MedicalAudience.PATIENT


class TranslateRequest(GenerationRequest):
	task: ClassVar[TaskKind] = TaskKind.TRANSLATE
	text: InputText
	source: Language = Language.ENGLISH
	target: Language = Language.HINDI


# ============================================================================
# GENERATION RESULTS
# ============================================================================

class PlainResult(BaseModel):
	model_config = ConfigDict(frozen=True)

	kind: Literal["plain"] = "plain"
	text: str


class StructuredResult(BaseModel):
	"""Generated text scored by the model (believability, sincerity) with an emoji."""
	model_config = ConfigDict(frozen=True)

	kind: Literal["structured"] = "structured"
	text: str
	percentage: int = Field(ge=0, le=100)
	emoji: str


GenerationResult = Annotated[Union[PlainResult, StructuredResult], Field(discriminator="kind")]


class ChatMessage(BaseModel):
	role: Literal["user", "model"]
	text: str
