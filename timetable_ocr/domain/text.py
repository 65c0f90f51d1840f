import re

# Пробельные символы как в str.split(), но без разделителей \x1c-\x1f:
# в повреждённых PDF это мусор, и он должен остаться в тексте для triage
_WHITESPACE = re.compile(r"[^\S\x1c-\x1f]+")


def normalize_whitespace(text: str) -> str:
    """Схлопывает все пробельные последовательности (включая переводы строк) в один пробел."""
    return " ".join(part for part in _WHITESPACE.split(text) if part)
