import pytest
from pydantic import ValidationError

from smart_sense.models import (
	LANGUAGE_LOCALES,
	ExcuseRequest,
	Language,
	LetterRequest,
	ResultShape,
	StructuredResult,
	TaskKind,
	TranslateRequest,
)


def test_every_language_has_one_distinct_locale() -> None:
	assert set(LANGUAGE_LOCALES) == set(Language)
	locales = [lang.locale for lang in Language]
	assert all(locales)
	assert len(set(locales)) == len(locales)


def test_only_excuse_and_apology_are_structured() -> None:
	structured = {task for task in TaskKind if task.shape is ResultShape.STRUCTURED}
	assert structured == {TaskKind.EXCUSE, TaskKind.APOLOGY}


@pytest.mark.parametrize("situation", ["", "   ", "\n\t"])
def test_empty_situation_is_rejected_before_any_prompt(situation: str) -> None:
	with pytest.raises(ValidationError):
		ExcuseRequest(situation=situation)


def test_request_text_is_stripped_and_frozen() -> None:
	req = TranslateRequest(text="  good morning  ", target=Language.FRENCH)
	assert req.text == "good morning"
	assert req.source is Language.ENGLISH
	with pytest.raises(ValidationError):
		req.text = "changed"


def test_letter_sender_accepts_from_key() -> None:
	req = LetterRequest.model_validate({"to": "Ana", "from": "Ben", "points": "thanks"})
	assert req.sender == "Ben"


def test_structured_result_bounds_percentage() -> None:
	with pytest.raises(ValidationError):
		StructuredResult(text="x", percentage=101, emoji="🙂")
