from __future__ import annotations

from .schemas import ExamConfig


QUIZ_QUESTION_COUNT = 3

CABARET_PERSONA = (
	"Je bent een cabaretier in de stijl van Youp van 't Hek. "
	"Reageer grappig en sarcastisch op het volgende: "
)


def build_quiz_prompt(keywords: str) -> str:
	return (
		f"Genereer een multiple choice quiz met {QUIZ_QUESTION_COUNT} vragen over het volgende onderwerp: {keywords.strip()}.\n"
		"Geef het antwoord in dit JSON formaat:\n"
		"{\n"
		'  "questions": [\n'
		"    {\n"
		'      "question": "De vraag hier",\n'
		'      "options": ["A) optie 1", "B) optie 2", "C) optie 3", "D) optie 4"],\n'
		'      "correctAnswer": "A) optie 1"\n'
		"    }\n"
		"  ]\n"
		"}\n"
		"Zorg ervoor dat het valide JSON is."
	)


def build_exam_prompt(config: ExamConfig) -> str:
	case_line = "Met casus" if config.needs_case else "Zonder casus"
	return (
		"Als toetsexpert, ontwikkel alsjeblieft toetsvragen met de volgende specificaties:\n"
		f"- Type: {config.question_type}\n"
		f"- Aantal vragen: {config.question_count}\n"
		f"- Onderwijsniveau: {config.education_level}\n"
		f"- Bloom's niveau: {config.bloom_level}\n"
		f"- {case_line}\n"
		f"- Onderwerp: {config.subject}\n"
		f"- Context: {config.context}"
	)


def build_cabaret_prompt(message: str) -> str:
	return CABARET_PERSONA + message
