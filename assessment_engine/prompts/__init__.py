"""
AI prompt templates for the assessment engine

Contains structured prompts for:
- Question generation and follow-ups
- Answer evaluation, assessment and analysis
- Session feedback
"""

from assessment_engine.prompts.interviewer import InterviewerPrompts
from assessment_engine.prompts.evaluator import EvaluatorPrompts
from assessment_engine.prompts.report import ReportPrompts

__all__ = [
    "InterviewerPrompts",
    "EvaluatorPrompts",
    "ReportPrompts",
]
