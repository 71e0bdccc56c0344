def parse_text(content: str) -> tuple[str, str]:
    """
    Split user input into (first, second), e.g. title/description or question/answer.

    A pipe wins over newlines; with neither, the second part is empty.
    """
    text = content.strip()

    if '|' in text:
        parts = text.split('|', 1)
        return parts[0].strip(), parts[1].strip()

    if '\n' in text:
        lines = [l.strip() for l in text.split('\n') if l.strip()]
        if len(lines) >= 2:
            return lines[0], '\n'.join(lines[1:])

    return text, ''


def split_id(content: str) -> tuple[int, str]:
    """
    '12 rest of text' -> (12, 'rest of text').
    Raises ValueError when the first word isn't a positive integer.
    """
    parts = content.strip().split(None, 1)
    head = parts[0] if parts else ''
    rest = parts[1] if len(parts) > 1 else ''
    if not head.isdigit() or int(head) < 1:
        raise ValueError(f"expected an id, got {head!r}")
    return int(head), rest.strip()


def truncate(text: str, max_len: int) -> str:
    return text if len(text) <= max_len else text[:max_len - 1] + '\u2026'
