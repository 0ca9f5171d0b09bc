from textwrap import dedent


def get_awareness_prompt(city: str, issue: str) -> str:
    return " ".join(
        dedent(
            f"""\
            Create a powerful and emotional climate change awareness image depicting the impact of {issue} in {city}.
            Show realistic consequences and environmental effects, focusing on human impact and urgency for action.
            Style: photorealistic, dramatic lighting, emotional impact"""
        ).splitlines()
    )
