"""Amount in words (Indian numbering: crore, lakh, thousand)"""

from decimal import Decimal, ROUND_HALF_UP

_ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]


def _below_thousand(n: int) -> str:
    if n < 20:
        return _ONES[n]
    if n < 100:
        return _TENS[n // 10] + (" " + _ONES[n % 10] if n % 10 else "")
    rest = n % 100
    return _ONES[n // 100] + " Hundred" + (" and " + _below_thousand(rest) if rest else "")


def amount_in_words(amount: Decimal) -> str:
    """
    Spell a rupee amount rounded to the nearest rupee

    >>> amount_in_words(Decimal("230"))
    'Two Hundred and Thirty Rupees'
    """
    num = int(Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if num <= 0:
        return "Zero Rupees"
    return _spell(num) + " Rupees"


def _spell(num: int) -> str:
    crore, num = divmod(num, 10_000_000)
    lakh, num = divmod(num, 100_000)
    thousand, num = divmod(num, 1000)
    hundred, rest = divmod(num, 100)

    words = []
    if crore:
        words.append(_spell(crore) + " Crore")
    if lakh:
        words.append(_below_thousand(lakh) + " Lakh")
    if thousand:
        words.append(_below_thousand(thousand) + " Thousand")
    if hundred:
        words.append(_ONES[hundred] + " Hundred")
    if rest:
        if words:
            words.append("and")
        words.append(_below_thousand(rest))

    return " ".join(words)
