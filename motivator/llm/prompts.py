from typing import Dict, List

MOTIVATOR_SYSTEM = (
    "You are a compassionate and motivational assistant. "
    "The user is feeling a certain way and has requested a specific type of support. "
    "Your response should be concise, directly address their feeling, and provide the requested support. "
    'The support type is: "{response_type}".'
)


def build_system_prompt(response_type: str) -> str:
    # response_type goes in verbatim; no escaping of quotes or newlines
    return MOTIVATOR_SYSTEM.format(response_type=response_type)


def build_messages(feeling: str, response_type: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": build_system_prompt(response_type)},
        {"role": "user", "content": feeling},
    ]
