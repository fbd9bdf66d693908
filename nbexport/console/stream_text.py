"""Terminal-style collapsing of streamed execution output."""


def format_stream_text(raw: str) -> str:
    """
    Render ``raw`` the way a terminal would show it.

    A bare ``\\r`` returns to the start of the line, so only the text written
    after the last one survives; ``\\r\\n`` is an ordinary line break. Progress
    output such as ``"\\rExecute\\rExecute 1"`` collapses to ``"Execute 1"``.
    """
    segments = raw.split('\n')
    visible = []
    for i, segment in enumerate(segments):
        if i < len(segments) - 1 and segment.endswith('\r'):
            segment = segment[:-1]
        visible.append(segment.rsplit('\r', 1)[-1])
    return '\n'.join(visible)
