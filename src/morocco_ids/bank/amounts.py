"""French spelling of dirham amounts, as printed on cheques and transfer orders.

Example
-------
>>> mad_to_words(1234)
'mille deux cent trente-quatre dirhams'
>>> mad_to_words(1234.56)
'mille deux cent trente-quatre dirhams et cinquante-six centimes'
>>> mad_to_words(-1)
'moins un dirham'
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from morocco_ids.bank.validator import BankValidationError, BankValidationErrorCode

_UNITS: tuple[str, ...] = (
    "zéro", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
    "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize",
    "dix-sept", "dix-huit", "dix-neuf",
)
_TENS: dict[int, str] = {
    2: "vingt",
    3: "trente",
    4: "quarante",
    5: "cinquante",
    6: "soixante",
}
_SCALES: tuple[tuple[int, str], ...] = (
    (1_000_000_000, "milliard"),
    (1_000_000, "million"),
)
_CENTIME = Decimal("0.01")


def _below_hundred(n: int, final: bool) -> str:
    if n < 20:
        return _UNITS[n]
    tens, unit = divmod(n, 10)
    if tens in (7, 9):
        # 70-79 and 90-99 are built on 60 and 80 plus 10-19.
        base = "soixante" if tens == 7 else "quatre-vingt"
        joiner = " et " if n == 71 else "-"
        return base + joiner + _UNITS[10 + unit]
    if tens == 8:
        if unit == 0:
            return "quatre-vingts" if final else "quatre-vingt"
        return "quatre-vingt-" + _UNITS[unit]
    word = _TENS[tens]
    if unit == 0:
        return word
    if unit == 1:
        return f"{word} et un"
    return f"{word}-{_UNITS[unit]}"


def _below_thousand(n: int, final: bool = True) -> str:
    hundreds, rest = divmod(n, 100)
    words: list[str] = []
    if hundreds:
        if hundreds == 1:
            words.append("cent")
        elif rest == 0 and final:
            words.append(f"{_UNITS[hundreds]} cents")
        else:
            words.append(f"{_UNITS[hundreds]} cent")
    if rest:
        words.append(_below_hundred(rest, final))
    return " ".join(words)


def _integer_to_words(n: int) -> str:
    if n == 0:
        return _UNITS[0]
    words: list[str] = []
    for scale, name in _SCALES:
        count, n = divmod(n, scale)
        if count:
            plural = "s" if count > 1 else ""
            words.append(f"{_integer_to_words(count)} {name}{plural}")
    thousands, n = divmod(n, 1000)
    if thousands:
        words.append("mille" if thousands == 1 else f"{_below_thousand(thousands, final=False)} mille")
    if n:
        words.append(_below_thousand(n))
    return " ".join(words)


def _to_decimal(amount: object) -> Decimal:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise BankValidationError(
            BankValidationErrorCode.INVALID_AMOUNT,
            "Amount must be a valid number",
            {"provided_amount": amount},
        )
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as exc:
        raise BankValidationError(
            BankValidationErrorCode.INVALID_AMOUNT,
            "Amount must be a valid number",
            {"provided_amount": amount},
        ) from exc
    if not value.is_finite():
        raise BankValidationError(
            BankValidationErrorCode.INVALID_AMOUNT,
            "Amount must be a finite number",
            {"provided_amount": amount},
        )
    return value.quantize(_CENTIME, rounding=ROUND_HALF_UP)


def mad_to_words(amount: object) -> str:
    """Spell a Moroccan dirham amount in French.

    Parameters
    ----------
    amount:
        ``int``, ``float`` or ``Decimal``.  Rounded half-up to the centime.

    Returns
    -------
    str
        The amount in words, e.g. ``"vingt et un dirhams et un centime"``.

    Raises
    ------
    BankValidationError
        ``BANK_009`` when ``amount`` is not a finite number.
    """
    value = _to_decimal(amount)
    negative = value < 0
    value = abs(value)

    whole = int(value)
    centimes = int((value - whole) * 100)

    if whole == 0 and centimes == 0:
        return "zéro dirham"

    parts: list[str] = []
    if whole:
        # "un million de dirhams" but "un million cent dirhams"
        joiner = " de " if whole >= 1_000_000 and whole % 1_000_000 == 0 else " "
        parts.append(f"{_integer_to_words(whole)}{joiner}dirham{'s' if whole > 1 else ''}")
    if centimes:
        parts.append(f"{_integer_to_words(centimes)} centime{'s' if centimes > 1 else ''}")

    words = " et ".join(parts)
    return f"moins {words}" if negative else words
