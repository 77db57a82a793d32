"""Speech capture and synthesis side channels."""

from .capture import ListeningState, SpeechCaptureAdapter
from .interfaces import AudioSink, EngineFactory, RecognitionEngine, RecognitionResult, SinkFactory
from .synthesis import CHANNELS, SAMPLE_RATE, SpeechSynthesisAdapter, decode_pcm16

__all__ = [
	"AudioSink",
	"CHANNELS",
	"EngineFactory",
	"ListeningState",
	"RecognitionEngine",
	"RecognitionResult",
	"SAMPLE_RATE",
	"SinkFactory",
	"SpeechCaptureAdapter",
	"SpeechSynthesisAdapter",
	"decode_pcm16",
]
