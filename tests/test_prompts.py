from smart_sense.models import (
	ApologyRequest,
	EmailRequest,
	ExcuseMode,
	ExcuseRequest,
	Language,
	LetterRequest,
	MedicalAudience,
	MedicalInfoRequest,
	ResultShape,
	RoadmapRequest,
	SummaryLength,
	SummaryRequest,
	TaskKind,
	TranslateRequest,
)
from smart_sense.prompts import build_prompt


def test_urgent_excuse_prompt_embeds_mode_and_situation(config) -> None:
	prompt = build_prompt(ExcuseRequest(situation="car broke down", mode=ExcuseMode.URGENT), config)

	assert prompt.task is TaskKind.EXCUSE
	assert prompt.shape is ResultShape.STRUCTURED
	assert "urgent" in prompt.instruction
	assert "car broke down" in prompt.instruction
	assert "believability percentage" in prompt.instruction
	assert prompt.model == config.gemini_model


def test_apology_prompt_is_structured(config) -> None:
	prompt = build_prompt(ApologyRequest(situation="missed your birthday"), config)
	assert prompt.shape is ResultShape.STRUCTURED
	assert prompt.instruction.startswith("Generate a sincere apology for: \"missed your birthday\".")


def test_email_and_letter_list_their_fields(config) -> None:
	email = build_prompt(EmailRequest(to="HR", subject="Leave", points="two days off"), config)
	letter = build_prompt(LetterRequest.model_validate({"to": "Gran", "from": "Sam", "points": "visit soon", "tone": "Friendly"}), config)

	assert "- To: HR\n- Subject: Leave\n- Points: two days off" in email.instruction
	assert email.instruction.endswith("Generate only the email body.")
	assert letter.instruction.startswith("Compose a friendly letter body")
	assert "- From: Sam" in letter.instruction
	assert email.shape is letter.shape is ResultShape.PLAIN


def test_summary_uses_length_word(config) -> None:
	prompt = build_prompt(SummaryRequest(text="A long text.", length=SummaryLength.SHORT), config)
	assert prompt.instruction == "Summarize the following text in a short format:\n\n\"A long text.\""


def test_roadmap_goes_to_roadmap_model(config) -> None:
	prompt = build_prompt(RoadmapRequest(topic="machine learning"), config)
	assert prompt.model == config.gemini_model_roadmap
	assert "\"machine learning\"" in prompt.instruction
	assert "Markdown" in prompt.instruction


def test_medical_prompt_depends_on_audience(config) -> None:
	patient = build_prompt(MedicalInfoRequest(condition="asthma"), config)
	student = build_prompt(MedicalInfoRequest(condition="flu", audience=MedicalAudience.STUDENT), config)

	assert "simplified description of \"asthma\"" in patient.instruction
	assert "This is not medical advice." in patient.instruction
	assert "doctor's note" in student.instruction
	assert "\"flu\"" in student.instruction


def test_translate_prompt_names_both_languages(config) -> None:
	prompt = build_prompt(TranslateRequest(text="hello", source=Language.ENGLISH, target=Language.JAPANESE), config)
	assert prompt.instruction == "Translate the following text from English to Japanese: \"hello\""
