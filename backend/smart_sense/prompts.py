"""
Prompt builders.

One pure function per task turns validated form input into the instruction
sent to Gemini. `build_prompt` picks the builder for a request and resolves the
result shape and model once, so nothing downstream has to guess them from the
task name.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict

from .models import (
	ApologyRequest,
	EmailRequest,
	ExcuseRequest,
	GenerationRequest,
	LetterRequest,
	MedicalAudience,
	MedicalInfoRequest,
	ResultShape,
	RoadmapRequest,
	SummaryRequest,
	TaskKind,
	TranslateRequest,
)
from .settings import Settings, settings as default_settings


@dataclass(frozen=True)
class Prompt:
	task: TaskKind
	instruction: str
	shape: ResultShape
	model: str


def build_excuse_prompt(req: ExcuseRequest) -> str:
	return (
		f"Generate a {req.mode.value.lower()} excuse for the following situation: \"{req.situation}\". "
		"Make it concise and creative. Also provide a believability percentage and a fitting emoji."
	)


def build_apology_prompt(req: ApologyRequest) -> str:
	return (
		f"Generate a {req.tone.value.lower()} apology for: \"{req.situation}\". "
		"Make it heartfelt. Also provide a sincerity percentage and a fitting emoji."
	)


def build_email_prompt(req: EmailRequest) -> str:
	return (
		f"Compose a {req.tone.value.lower()} email body with these details:\n"
		f"- To: {req.to}\n"
		f"- Subject: {req.subject}\n"
		f"- Points: {req.points}\n"
		"Generate only the email body."
	)


def build_letter_prompt(req: LetterRequest) -> str:
	return (
		f"Compose a {req.tone.value.lower()} letter body with these details:\n"
		f"- To: {req.to}\n"
		f"- From: {req.sender}\n"
		f"- Points: {req.points}\n"
		"Generate only the letter body."
	)


def build_summary_prompt(req: SummaryRequest) -> str:
	return f"Summarize the following text in a {req.length.value.lower()} format:\n\n\"{req.text}\""


def build_roadmap_prompt(req: RoadmapRequest) -> str:
	return (
		f"Generate a structured, beginner-friendly learning roadmap for \"{req.topic}\". "
		"Include clear steps, key concepts, and suggest real, hyperlinked online resources "
		"(articles, videos, interactive tutorials, projects) for each step. Format as Markdown."
	)


def build_medical_prompt(req: MedicalInfoRequest) -> str:
	if req.audience is MedicalAudience.STUDENT:
		return (
			"For educational purposes, generate a fake but believable medical proof/doctor's note "
			f"for a student needing a leave of absence for \"{req.condition}\". "
			"Include a fictional doctor's name and clinic. This is not real medical advice."
		)
	return (
		f"For educational purposes, generate a simplified description of \"{req.condition}\" for a \"Patient\". "
		"Cover what it is, common symptoms, and general treatment approaches in simple terms. "
		"This is not medical advice."
	)


def build_translate_prompt(req: TranslateRequest) -> str:
	return f"Translate the following text from {req.source.value} to {req.target.value}: \"{req.text}\""


PROMPT_BUILDERS: Dict[TaskKind, Callable[..., str]] = {
	TaskKind.EXCUSE: build_excuse_prompt,
	TaskKind.APOLOGY: build_apology_prompt,
	TaskKind.EMAIL: build_email_prompt,
	TaskKind.LETTER: build_letter_prompt,
	TaskKind.SUMMARY: build_summary_prompt,
	TaskKind.ROADMAP: build_roadmap_prompt,
	TaskKind.MEDICAL_INFO: build_medical_prompt,
	TaskKind.TRANSLATE: build_translate_prompt,
}


def model_for(task: TaskKind, config: Settings) -> str:
	# Roadmaps are long-form and go to the larger model
	if task is TaskKind.ROADMAP:
		return config.gemini_model_roadmap
	return config.gemini_model


def build_prompt(req: GenerationRequest, config: Settings | None = None) -> Prompt:
	config = config or default_settings
	task = req.task
	instruction = PROMPT_BUILDERS[task](req)
	return Prompt(task=task, instruction=instruction, shape=task.shape, model=model_for(task, config))
