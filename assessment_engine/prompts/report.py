"""
Session Feedback Prompts

Contains the prompt for the whole-session assessment and hiring
recommendation.
"""

from assessment_engine.models.feedback import QuestionRecord


class ReportPrompts:
    """Prompt templates for session-level feedback."""

    FEEDBACK_SYSTEM_ROLE = (
        "You are a senior technical interviewer providing comprehensive candidate feedback. "
        "Return only valid JSON."
    )

    def generate_overall_feedback_prompt(
        self,
        records: list[QuestionRecord],
        skills: list[str],
        candidate_name: str | None = None,
    ) -> str:
        """Generate prompt for overall interview feedback."""

        qa_lines = []
        for i, record in enumerate(records, 1):
            score = f"{record.score:.1f}/10" if record.score is not None else "not scored"
            qa_lines.append(f"Q{i}: {record.question}")
            qa_lines.append(f"A{i}: {record.answer or '(no answer)'}")
            qa_lines.append(f"Score: {score}")
            if record.feedback:
                qa_lines.append(f"Feedback: {record.feedback}")
            qa_lines.append("")
        qa_text = "\n".join(qa_lines) if qa_lines else "No questions were answered."

        skill_list = ", ".join(skills) if skills else "Not specified"

        return f"""Generate comprehensive interview feedback for a candidate based on their performance.

Candidate: {candidate_name or "Candidate"}
Candidate Skills: {skill_list}
Number of Questions: {len(records)}

=== QUESTIONS AND ANSWERS ===
{qa_text}
=== YOUR TASK ===
Provide:
1. Overall assessment
2. Top 3 strengths
3. Top 3 areas for improvement
4. Hiring recommendation
5. Technical feedback

IMPORTANT: Output ONLY valid JSON, no preamble text. Start directly with {{

{{
    "overall_assessment": "2-3 sentence summary",
    "strengths": ["strength1", "strength2", "strength3"],
    "improvements": ["area1", "area2", "area3"],
    "recommendation": "strongly_recommend|recommend|neutral|not_recommend|strongly_not_recommend",
    "technical_feedback": "specific technical feedback"
}}
"""
