"""Quiz session state and the terminal front-end built on the scenario generators."""

from .session import AnswerDetail, QuizConfig, QuizResults, QuizSession, generate_questions

__all__ = ["AnswerDetail", "QuizConfig", "QuizResults", "QuizSession", "generate_questions"]
