"""
AI Interviewer Prompt Templates

Contains structured prompts for:
- Question generation (line-tagged and online JSON variants)
- Follow-up questions
- Live interviewer suggestions

Every prompt states the output format the response parser expects.
"""

from assessment_engine.models.feedback import CandidateProfile
from assessment_engine.models.question import (
    Difficulty,
    ExperienceLevel,
    GenerationOptions,
    RequestedQuestionType,
)


class InterviewerPrompts:
    """
    Prompt templates for the AI interviewer.

    Key principles:
    - Questions matched to the candidate's experience
    - Practical problem-solving over trivia
    - Output shape spelled out for the parser
    """

    QUESTION_SYSTEM_ROLE = (
        "You are an expert technical interviewer. "
        "Generate relevant, challenging, and fair interview questions."
    )
    ONLINE_QUESTION_SYSTEM_ROLE = (
        "You are an expert AI interview system designer. "
        "Generate structured questions with assessment criteria. Return only valid JSON."
    )
    FOLLOWUP_SYSTEM_ROLE = "You are an expert interviewer generating insightful follow-up questions."
    SUGGESTION_SYSTEM_ROLE = (
        "You are a senior interviewer coaching a colleague during a live interview. "
        "Return only valid JSON."
    )

    def generate_question_prompt(self, options: GenerationOptions) -> str:
        """Generate prompt for line-tagged question generation."""

        skills = ", ".join(options.skills) if options.skills else "General software engineering"
        resume = f"Resume content:\n{options.resume_text}\n" if options.resume_text else ""
        type_line = (
            "\nType: [technical or behavioral]"
            if options.question_type == RequestedQuestionType.MIXED
            else ""
        )

        return f"""Generate {options.question_count} {options.difficulty.value} level {options.question_type.value} interview questions for a {options.experience.value} candidate.

Skills to focus on: {skills}
Interview mode: {options.interview_mode.value}
Interview duration: {options.duration_minutes} minutes

{resume}
Requirements:
- Questions should be relevant to the candidate's experience level
- Focus on practical problem-solving
- Include both conceptual and implementation questions

For each question, provide:
1. The question text
2. Expected answer outline
3. Key evaluation criteria

Format each question as:
Q: [Question text]
Expected: [Expected answer outline]
Criteria: [Comma-separated evaluation criteria]{type_line}

---
"""

    def generate_online_question_prompt(
        self,
        skills: list[str],
        difficulty: Difficulty,
        count: int,
        experience: ExperienceLevel,
        duration_minutes: int,
    ) -> str:
        """Generate prompt for the online interview JSON question set."""

        skill_list = ", ".join(skills) if skills else "General software engineering"

        return f"""Generate {count} interview questions for an online AI-driven interview.

Skills: {skill_list}
Experience Level: {experience.value}
Difficulty: {difficulty.value}
Duration: {duration_minutes} minutes

Requirements:
1. Questions should be answerable in 2-3 minutes each
2. Include technical and behavioral questions
3. Provide expected answer keywords
4. Output ONLY a JSON array, no preamble text. Each element:
   {{
     "id": "q1",
     "question": "question text",
     "type": "technical|behavioral",
     "skill": "relevant skill",
     "difficulty": 1-10,
     "expectedKeywords": ["keyword1", "keyword2"],
     "timeLimit": 3,
     "assessmentCriteria": ["criterion1", "criterion2"]
   }}
"""

    def generate_followup_prompt(self, original_question: str, candidate_answer: str) -> str:
        """Generate prompt for follow-up questions."""

        return f"""Based on the following interview question and candidate's response, generate 1-2 relevant follow-up questions:

Original Question: {original_question}
Candidate's Answer: {candidate_answer}

Generate follow-up questions that explore deeper understanding.
Return only the follow-up questions, one per line.
"""

    def generate_suggestion_prompt(
        self,
        profile: CandidateProfile,
        current_question: str,
        answers_so_far: int,
        elapsed_minutes: float | None = None,
    ) -> str:
        """Generate prompt for live interviewer suggestions."""

        skills = ", ".join(profile.skills) if profile.skills else "Not specified"
        experience = profile.experience.value if profile.experience else "Not specified"
        elapsed = f"{elapsed_minutes:.0f} minutes" if elapsed_minutes is not None else "Unknown"
        notes = profile.notes or "None"

        return f"""You are assisting an interviewer who is running a live {profile.interview_type} interview.

=== CANDIDATE ===
Name: {profile.name}
Target Role: {profile.target_role or "Not specified"}
Experience: {experience}
Skills: {skills}
Interviewer Notes: {notes}

=== PROGRESS ===
Current Question: {current_question}
Answers Given So Far: {answers_so_far}
Time Elapsed: {elapsed}

=== YOUR TASK ===
Suggest how the interviewer should proceed.

IMPORTANT: Output ONLY valid JSON, no preamble text. Start directly with {{

{{
    "follow_up_questions": ["question to probe the current topic", "..."],
    "assessment_points": ["what to listen for in the next answer"],
    "red_flags": ["concerns to watch for, empty if none"],
    "strengths": ["strengths observed so far"],
    "next_topics": ["topics to cover next"],
    "time_management_note": "one sentence on pacing"
}}
"""
