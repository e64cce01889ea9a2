"""Static hiragana/katakana to romaji reference table.

Rows are authored once as (hiragana, katakana, romaji) triples per sound
category and expanded into one record per script, so the two scripts stay
symmetric by construction. Hepburn romanization throughout.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from errors import DatasetIntegrityError

KanaType = Literal["hiragana", "katakana"]
Category = Literal["seion", "youon", "dakuon_handaon"]

KANA_TYPES: tuple[str, ...] = ("hiragana", "katakana")
CATEGORIES: tuple[str, ...] = ("seion", "youon", "dakuon_handaon")

EXPECTED_RECORD_COUNT = 220

# ぢ/づ and their palatalized forms read the same as じ/ず in Hepburn.
SHARED_DAKUON_ROMAJI: frozenset[str] = frozenset({"ji", "zu", "ja", "ju", "jo"})

_SCRIPT_RANGES: dict[str, tuple[int, int]] = {
    "hiragana": (0x3041, 0x309F),
    "katakana": (0x30A0, 0x30FF),
}

SEION: tuple[tuple[str, str, str], ...] = (
    ("あ", "ア", "a"), ("い", "イ", "i"), ("う", "ウ", "u"), ("え", "エ", "e"), ("お", "オ", "o"),
    ("か", "カ", "ka"), ("き", "キ", "ki"), ("く", "ク", "ku"), ("け", "ケ", "ke"), ("こ", "コ", "ko"),
    ("さ", "サ", "sa"), ("し", "シ", "shi"), ("す", "ス", "su"), ("せ", "セ", "se"), ("そ", "ソ", "so"),
    ("た", "タ", "ta"), ("ち", "チ", "chi"), ("つ", "ツ", "tsu"), ("て", "テ", "te"), ("と", "ト", "to"),
    ("な", "ナ", "na"), ("に", "ニ", "ni"), ("ぬ", "ヌ", "nu"), ("ね", "ネ", "ne"), ("の", "ノ", "no"),
    ("は", "ハ", "ha"), ("ひ", "ヒ", "hi"), ("ふ", "フ", "fu"), ("へ", "ヘ", "he"), ("ほ", "ホ", "ho"),
    ("ま", "マ", "ma"), ("み", "ミ", "mi"), ("む", "ム", "mu"), ("め", "メ", "me"), ("も", "モ", "mo"),
    ("や", "ヤ", "ya"), ("ゆ", "ユ", "yu"), ("よ", "ヨ", "yo"),
    ("ら", "ラ", "ra"), ("り", "リ", "ri"), ("る", "ル", "ru"), ("れ", "レ", "re"), ("ろ", "ロ", "ro"),
    ("わ", "ワ", "wa"), ("を", "ヲ", "wo"), ("ん", "ン", "n"),
    # historical
    ("ゐ", "ヰ", "wi"), ("ゑ", "ヱ", "we"),
)

YOUON: tuple[tuple[str, str, str], ...] = (
    ("きゃ", "キャ", "kya"), ("きゅ", "キュ", "kyu"), ("きょ", "キョ", "kyo"),
    ("しゃ", "シャ", "sha"), ("しゅ", "シュ", "shu"), ("しょ", "ショ", "sho"),
    ("ちゃ", "チャ", "cha"), ("ちゅ", "チュ", "chu"), ("ちょ", "チョ", "cho"),
    ("にゃ", "ニャ", "nya"), ("にゅ", "ニュ", "nyu"), ("にょ", "ニョ", "nyo"),
    ("ひゃ", "ヒャ", "hya"), ("ひゅ", "ヒュ", "hyu"), ("ひょ", "ヒョ", "hyo"),
    ("みゃ", "ミャ", "mya"), ("みゅ", "ミュ", "myu"), ("みょ", "ミョ", "myo"),
    ("りゃ", "リャ", "rya"), ("りゅ", "リュ", "ryu"), ("りょ", "リョ", "ryo"),
)

DAKUON_HANDAON: tuple[tuple[str, str, str], ...] = (
    ("が", "ガ", "ga"), ("ぎ", "ギ", "gi"), ("ぐ", "グ", "gu"), ("げ", "ゲ", "ge"), ("ご", "ゴ", "go"),
    ("ざ", "ザ", "za"), ("じ", "ジ", "ji"), ("ず", "ズ", "zu"), ("ぜ", "ゼ", "ze"), ("ぞ", "ゾ", "zo"),
    ("だ", "ダ", "da"), ("ぢ", "ヂ", "ji"), ("づ", "ヅ", "zu"), ("で", "デ", "de"), ("ど", "ド", "do"),
    ("ば", "バ", "ba"), ("び", "ビ", "bi"), ("ぶ", "ブ", "bu"), ("べ", "ベ", "be"), ("ぼ", "ボ", "bo"),
    ("ぱ", "パ", "pa"), ("ぴ", "ピ", "pi"), ("ぷ", "プ", "pu"), ("ぺ", "ペ", "pe"), ("ぽ", "ポ", "po"),
    ("ぎゃ", "ギャ", "gya"), ("ぎゅ", "ギュ", "gyu"), ("ぎょ", "ギョ", "gyo"),
    ("じゃ", "ジャ", "ja"), ("じゅ", "ジュ", "ju"), ("じょ", "ジョ", "jo"),
    ("ぢゃ", "ヂャ", "ja"), ("ぢゅ", "ヂュ", "ju"), ("ぢょ", "ヂョ", "jo"),
    ("びゃ", "ビャ", "bya"), ("びゅ", "ビュ", "byu"), ("びょ", "ビョ", "byo"),
    ("ぴゃ", "ピャ", "pya"), ("ぴゅ", "ピュ", "pyu"), ("ぴょ", "ピョ", "pyo"),
    ("ゔ", "ヴ", "vu"),
)

CATEGORY_TABLES: tuple[tuple[str, tuple[tuple[str, str, str], ...]], ...] = (
    ("seion", SEION),
    ("youon", YOUON),
    ("dakuon_handaon", DAKUON_HANDAON),
)


class KanaRecord(BaseModel):
    """One kana glyph (or digraph) and its romanization."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kana_type: KanaType
    category: Category
    kana: str = Field(min_length=1, max_length=2)
    romaji: str = Field(min_length=1)

    @field_validator("romaji")
    @classmethod
    def _romaji_is_lowercase_ascii(cls, value: str) -> str:
        if not (value.isascii() and value.isalpha() and value.islower()):
            raise ValueError(f"romaji must be lowercase ASCII letters, got {value!r}")
        return value

    @model_validator(mode="after")
    def _kana_matches_script(self) -> KanaRecord:
        low, high = _SCRIPT_RANGES[self.kana_type]
        if not all(low <= ord(ch) <= high for ch in self.kana):
            raise ValueError(f"{self.kana!r} is not {self.kana_type}")
        return self

    @property
    def key(self) -> tuple[str, str]:
        return (self.kana_type, self.kana)


def make_record(kana_type: str, category: str, kana: str, romaji: str) -> KanaRecord:
    try:
        return KanaRecord(kana_type=kana_type, category=category, kana=kana, romaji=romaji)
    except ValidationError as exc:
        raise DatasetIntegrityError(f"Invalid kana record {kana!r}: {exc}") from exc


def validate_dataset(records: Sequence[KanaRecord]) -> None:
    """Check uniqueness, script symmetry and romaji collisions.

    Raises DatasetIntegrityError on the first broken invariant.
    """
    seen: set[tuple[str, str]] = set()
    for record in records:
        if record.key in seen:
            raise DatasetIntegrityError(f"Duplicate {record.kana_type} kana {record.kana!r}")
        seen.add(record.key)

    pairs: dict[str, Counter[tuple[str, str]]] = {kana_type: Counter() for kana_type in KANA_TYPES}
    for record in records:
        pairs[record.kana_type][(record.category, record.romaji)] += 1

    if pairs["hiragana"] != pairs["katakana"]:
        diff = (pairs["hiragana"] - pairs["katakana"]) + (pairs["katakana"] - pairs["hiragana"])
        raise DatasetIntegrityError(f"Hiragana and katakana tables differ at {sorted(diff)}")

    for kana_type, counts in pairs.items():
        for (category, romaji), count in counts.items():
            if count == 1:
                continue
            if category != "dakuon_handaon" or romaji not in SHARED_DAKUON_ROMAJI:
                raise DatasetIntegrityError(
                    f"Romaji {romaji!r} used {count} times in {kana_type} {category}"
                )


def build_dataset() -> list[KanaRecord]:
    """Return the full kana table, validated, in a fixed order."""
    records = [
        make_record(kana_type, category, hiragana if kana_type == "hiragana" else katakana, romaji)
        for category, table in CATEGORY_TABLES
        for kana_type in KANA_TYPES
        for hiragana, katakana, romaji in table
    ]
    validate_dataset(records)
    return records


def to_documents(records: Sequence[KanaRecord]) -> list[dict[str, Any]]:
    """Plain dicts for the driver; new objects each call since insert_many adds ``_id``."""
    return [record.model_dump() for record in records]


def summarize(records: Sequence[KanaRecord]) -> dict[tuple[str, str], int]:
    return dict(Counter((record.kana_type, record.category) for record in records))
