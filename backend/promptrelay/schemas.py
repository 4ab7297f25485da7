from __future__ import annotations
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


QuestionType = Literal["multiple-choice", "true-false", "open"]
EducationLevel = Literal["middelbare-school", "hbo", "universiteit"]
BloomLevel = Literal["kennis", "begrip", "toepassing", "analyse", "synthese", "evaluatie"]


class RelayResponse(BaseModel):
	response: str
	success: bool = True


class QuizRequest(BaseModel):
	keywords: str


class QuizQuestion(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	question: str
	options: List[str] = Field(min_length=2)
	correct_answer: str = Field(alias="correctAnswer")


class Quiz(BaseModel):
	questions: List[QuizQuestion] = Field(min_length=1)


class QuizResponse(Quiz):
	success: bool = True


class ExamConfig(BaseModel):
	question_type: QuestionType
	question_count: int = Field(default=1, ge=1, le=10)
	education_level: EducationLevel
	bloom_level: BloomLevel
	needs_case: bool = False
	subject: str = Field(min_length=1, max_length=200)
	context: str = Field(min_length=1)


class UploadResponse(BaseModel):
	content: str
	filename: str
	type: str
