"""
worldcal.core.text
------------------
Tokenizer and parser for date text.

Grammar (whitespace between tokens is ignored):

    numeric := field "/" field "/" ["-"] field [era]
    named   := WORD {WORD} field "," ["-"] field [era]
    era     := WORD {WORD}

The named form matches its leading words against the month table (full name
or three-letter abbreviation, case-insensitive). An era equal to the calendar's
previous era negates the year, unless both eras are the same label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple, Type

from .errors import (
    InvalidDate,
    InvalidDateText,
    InvalidDay,
    InvalidMonth,
    InvalidYear,
    UnknownMonthName,
)

if TYPE_CHECKING:
    from .calendar import CalendarDefinition

NUMBER = "number"
WORD = "word"
SLASH = "/"
COMMA = ","
MINUS = "-"

_PUNCTUATION = {SLASH, COMMA, MINUS}


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    pos: int


def tokenize(s: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        if ch.isspace():
            i += 1
        elif ch in _PUNCTUATION:
            tokens.append(Token(ch, ch, i))
            i += 1
        elif ch.isdecimal():
            j = i
            while j < n and s[j].isdecimal():
                j += 1
            tokens.append(Token(NUMBER, s[i:j], i))
            i = j
        elif ch.isalpha():
            j = i
            while j < n and s[j].isalpha():
                j += 1
            tokens.append(Token(WORD, s[i:j], i))
            i = j
        else:
            raise InvalidDateText(f"unexpected character '{ch}' in date text '{s}'", s)
    return tokens


def _norm(s: str) -> str:
    return " ".join(s.split()).lower()


class _Parser:
    def __init__(self, cal: CalendarDefinition, source: str):
        self.cal = cal
        self.source = source
        self.tokens = tokenize(source)
        self.pos = 0

    def _fail(self) -> InvalidDateText:
        return InvalidDateText(f"invalid date text '{self.source}'", self.source)

    def peek(self) -> Optional[Token]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def take(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def expect(self, kind: str) -> Token:
        tok = self.take()
        if tok is None or tok.kind != kind:
            raise self._fail()
        return tok

    def number(self, label: str, error: Type[InvalidDate]) -> int:
        tok = self.take()
        if tok is None or tok.kind in _PUNCTUATION:
            raise self._fail()
        if tok.kind != NUMBER:
            raise error(f"invalid {label} text '{tok.text}'", tok.text)
        try:
            return int(tok.text)
        except ValueError as e:
            # Digit runs past the interpreter's int conversion limit.
            raise error(f"invalid {label} text '{tok.text[:20]}...'", tok.text) from e

    def signed_number(self, label: str, error: Type[InvalidDate]) -> int:
        negative = False
        tok = self.peek()
        if tok is not None and tok.kind == MINUS:
            self.take()
            negative = True
        value = self.number(label, error)
        return -value if negative else value

    def words(self) -> List[str]:
        out: List[str] = []
        tok = self.peek()
        while tok is not None and tok.kind == WORD:
            out.append(tok.text)
            self.take()
            tok = self.peek()
        return out

    def era(self, year: int) -> int:
        words = self.words()
        tok = self.peek()
        if tok is not None:
            raise InvalidDateText(f"unexpected text '{tok.text}' in date text '{self.source}'", self.source)
        if not words:
            return year
        era = _norm(" ".join(words))
        cal = self.cal
        previous = _norm(cal.previous_era)
        if previous and era == previous:
            return -year if cal.previous_era != cal.era else year
        if era == _norm(cal.era):
            return year
        raise InvalidDateText(f"unknown era '{' '.join(words)}' in date text '{self.source}'", self.source)

    # ---------------------------------------------------------

    def parse(self) -> Tuple[int, int, int]:
        if len(self.tokens) > 1 and self.tokens[1].kind == SLASH:
            return self.numeric()
        if self.tokens and self.tokens[0].kind == WORD:
            return self.named()
        raise self._fail()

    def numeric(self) -> Tuple[int, int, int]:
        month = self.number("month", InvalidMonth)
        self.expect(SLASH)
        day = self.number("day", InvalidDay)
        self.expect(SLASH)
        year = self.signed_number("year", InvalidYear)
        return month, day, self.era(year)

    def named(self) -> Tuple[int, int, int]:
        name = " ".join(self.words())
        month = self.cal.month_index(name)
        if month is None:
            raise UnknownMonthName(f"invalid month text '{name}'", name)
        day = self.number("day", InvalidDay)
        self.expect(COMMA)
        year = self.signed_number("year", InvalidYear)
        return month, day, self.era(year)


def parse_date_text(cal: CalendarDefinition, s: str) -> Tuple[int, int, int]:
    """Return (month, day, year) from date text, with the era already applied to the year."""
    return _Parser(cal, s).parse()
