"""
Core text helpers shared by the relay service and the client.

Both sides must agree on the fallback title so that a title generated
locally after a failed request matches one the relay would have produced.
"""

FALLBACK_WORD_COUNT = 3
ELLIPSIS = "..."


def create_fallback_title(text: str) -> str:
    """
    Return a deterministic short title for a problem statement.

    Parameters
    ----------
    text:
        The problem as typed by the user.

    The first three whitespace-separated words are joined by single spaces;
    an ellipsis marker is appended when more words remain.
    """
    words = (text or "").split()
    title = " ".join(words[:FALLBACK_WORD_COUNT])
    if len(words) > FALLBACK_WORD_COUNT:
        title += ELLIPSIS
    return title


if __name__ == "__main__":
    print(create_fallback_title("Find the maximum subarray sum in an array of integers"))
