from .mentor_prompt import MentorPromptBuilder, MentorResponse, mentor_prompt_builder, split_mentor_response

__all__ = [
    'MentorPromptBuilder',
    'MentorResponse',
    'mentor_prompt_builder',
    'split_mentor_response',
]
