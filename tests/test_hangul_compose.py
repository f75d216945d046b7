import itertools

import pytest

from hangul_composer.domain import hangul_unicode as hu
from hangul_composer.domain.block import HangulBlock
from hangul_composer.domain.enums import Era
from hangul_composer.domain.errors import InvalidSequenceError, NotHangulError
from hangul_composer.domain.jamo import compose_syllable, jamo_from_compatibility as j, split


def test_compose_basic():
    assert HangulBlock(j("ㄱ"), j("ㅏ")).to_char() == "가"
    assert HangulBlock(j("ㄴ"), j("ㅣ")).to_char() == "니"
    assert HangulBlock(j("ㄱ"), j("ㅏ"), j("ㅇ")).to_char() == "강"
    assert HangulBlock(j("ㄷ"), j("ㅏ"), j("ㄺ")).to_char() == "닭"
    assert compose_syllable(j("ㅎ"), j("ㅣ"), j("ㅎ")) == "힣"


def test_compose_invalid():
    with pytest.raises(InvalidSequenceError):
        HangulBlock(j("ㅏ"), j("ㅏ"))
    with pytest.raises(InvalidSequenceError):
        HangulBlock(j("ㄳ"), j("ㅏ"))
    with pytest.raises(InvalidSequenceError):
        HangulBlock(j("ㄱ"), j("ㅏ"), j("ㄸ"))


def test_from_char():
    assert HangulBlock.from_char("앉") == HangulBlock(j("ㅇ"), j("ㅏ"), j("ㄵ"))
    with pytest.raises(NotHangulError):
        HangulBlock.from_char("A")
    with pytest.raises(NotHangulError):
        HangulBlock.from_char("ㄱ")


def test_decomposed_compatibility():
    block = HangulBlock.from_char("닭")
    assert block.decomposed() == ["ㄷ", "ㅏ", "ㄹ", "ㄱ"]
    assert block.decomposed(split_composites=False) == ["ㄷ", "ㅏ", "ㄺ"]
    assert HangulBlock.from_char("꽈").decomposed() == ["ㄱ", "ㄱ", "ㅗ", "ㅏ"]


def test_decomposed_modern():
    block = HangulBlock.from_char("각")
    assert block.decomposed(Era.MODERN) == ["\u1100", "\u1161", "\u11a8"]
    block = HangulBlock.from_char("없")
    assert block.decomposed(Era.MODERN) == ["\u110b", "\u1165", "\u11b8", "\u11ba"]
    assert block.decomposed(Era.MODERN, split_composites=False) == ["\u110b", "\u1165", "\u11b9"]


def test_every_syllable_round_trips():
    finals = (None,) + tuple(j(t) for t in hu.JONGSEONG[1:])
    for lead, vowel, final in itertools.product(hu.CHOSEONG, hu.JUNGSEONG, finals):
        block = HangulBlock(j(lead), j(vowel), final)
        char = block.to_char()
        assert HangulBlock.from_char(char) == block

        expected = [x.letter for slot in block.jamo() for x in split(slot)]
        assert block.decomposed() == expected


def test_syllable_range_covered():
    assert HangulBlock.from_char("가").to_char() == "가"
    assert HangulBlock.from_char("힣").to_char() == "힣"
