from __future__ import annotations

# Common closed-class words, mostly English with a few Spanish, French and
# German entries so short multilingual samples are not read as content-heavy.
_ENGLISH = (
    "the is in at of on and a to for with as by that this it be or are was "
    "were from an but not have has had can could will would should we you "
    "they he she i me my our your their them his her its if then than so "
    "also about into over after before because while when where which who "
    "whom what how why"
)
_SPANISH = "de la el y en que un una los las del se por con para"
_FRENCH = "les des du et le"
_GERMAN = "ein eine und der die das ist zu den dem auf im nicht ich"

STOPWORDS: frozenset[str] = frozenset(
    " ".join((_ENGLISH, _SPANISH, _FRENCH, _GERMAN)).split()
)


def is_stopword(token: str) -> bool:
    """Case-insensitive membership test against STOPWORDS."""
    return token.lower() in STOPWORDS
