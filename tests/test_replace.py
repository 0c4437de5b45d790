"""
測試對外替換入口

驗證：
1. 空表 / 空 needle 不影響輸出
2. 長者優先
3. 重疊拒絕順序取決於排序模式
4. 逐字元替換
5. 隨機替換表下的不重疊不變量
"""

import random

import pytest

from strtr import (
    ConfigurationError,
    InvalidArgumentError,
    OrderingMode,
    Replacer,
    replace_using_chars,
    replace_using_map,
    strtr,
)


class TestReplaceUsingMap:
    """測試 replace_using_map"""

    def test_empty_table_is_identity(self):
        text = "nothing to do"
        assert replace_using_map(text, {}) is text

    def test_empty_input(self):
        assert replace_using_map("", {"a": "b"}) == ""

    @pytest.mark.parametrize("text", ["", "abc", "a b c", "xxx"])
    def test_empty_needle_has_no_effect(self, text):
        with_empty = {"": "X", "b": "B"}
        without_empty = {"b": "B"}
        assert replace_using_map(text, with_empty) == replace_using_map(text, without_empty)

    def test_only_empty_needle(self):
        assert replace_using_map("abc", {"": "X"}) == "abc"

    def test_longest_first(self):
        assert replace_using_map("xaby", {"a": "1", "ab": "2"}) == "x2y"

    def test_lexicographic_tie_break(self):
        table = {"ab": "1", "bc": "2"}
        assert replace_using_map("abc", table, OrderingMode.LENGTH_DESCENDING_THEN_LEXICOGRAPHIC) == "1c"

    def test_lexicographic_tie_break_ignores_insertion_order(self):
        table = {"bc": "2", "ab": "1"}
        assert replace_using_map("abc", table) == "1c"

    def test_insertion_order(self):
        table = {"bc": "2", "ab": "1"}
        assert replace_using_map("abc", table, OrderingMode.INSERTION_ORDER) == "a2"

    def test_insertion_order_by_string(self):
        table = [("bc", "2"), ("ab", "1")]
        assert replace_using_map("abc", table, "insertion") == "a2"

    def test_round_trip_no_op(self):
        table = {"cat": "dog"}
        once = replace_using_map("the cat sat", table)
        assert once == "the dog sat"
        assert replace_using_map(once, table) == once

    def test_self_overlapping_needle(self):
        assert replace_using_map("aaa", {"aa": "b"}) == "ba"

    def test_replaced_text_not_rescanned(self):
        """替換結果不會再被其他 needle 替換"""
        assert replace_using_map("ab", {"a": "b", "b": "a"}) == "ba"

    def test_php_strtr_example(self):
        table = {"Hi": "Hello", "Hello": "Hi"}
        assert replace_using_map("Hi all, I said Hello", table) == "Hello all, I said Hi"

    def test_none_value_fails_fast(self):
        with pytest.raises(ConfigurationError):
            replace_using_map("abc", {"a": "1", "b": None})

    def test_none_value_fails_even_without_match(self):
        with pytest.raises(ConfigurationError):
            replace_using_map("abc", {"zzz": None})

    def test_unicode(self):
        assert replace_using_map("我在北車買流奶", {"北車": "台北車站", "流奶": "牛奶"}) == "我在台北車站買牛奶"


class TestReplaceUsingChars:
    """測試逐字元替換"""

    def test_basic(self):
        assert replace_using_chars("hello", "el", "ip") == "hippo"

    def test_length_mismatch(self):
        with pytest.raises(InvalidArgumentError, match="same number of characters"):
            replace_using_chars("hello", "ab", "c")

    def test_duplicate_from_last_wins(self):
        assert replace_using_chars("aaa", "aa", "xy") == "yyy"

    def test_swap(self):
        assert replace_using_chars("abba", "ab", "ba") == "baab"

    def test_empty_from_to(self):
        assert replace_using_chars("abc", "", "") == "abc"


class TestStrtrDispatch:
    """測試 PHP 風格入口"""

    def test_table_form(self):
        assert strtr("xaby", {"a": "1", "ab": "2"}) == "x2y"

    def test_chars_form(self):
        assert strtr("hello", "el", "ip") == "hippo"

    def test_bad_arity(self):
        with pytest.raises(InvalidArgumentError):
            strtr("hello")


class TestNonOverlapInvariant:
    """隨機替換表下，接受的區間彼此不共用任何 offset"""

    @pytest.mark.parametrize("mode", list(OrderingMode))
    def test_randomized_tables(self, mode):
        rng = random.Random(20240601)
        alphabet = "abc"
        for _ in range(200):
            text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 30)))
            table = {}
            for _ in range(rng.randint(1, 6)):
                needle = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 4)))
                table[needle] = "".join(rng.choice("XYZ") for _ in range(rng.randint(0, 3)))

            replacer = Replacer(table, mode)
            occurrences = replacer.find_occurrences(text)

            covered = set()
            for occ in occurrences:
                span = set(range(occ.start, occ.end + 1))
                assert not covered & span
                covered |= span
                assert text[occ.start:occ.end + 1] == occ.needle

            # 由 Occurrence 重建的結果必須與 replace() 一致
            expected = []
            last = 0
            for occ in occurrences:
                expected.append(text[last:occ.start])
                expected.append(occ.replacement)
                last = occ.end + 1
            expected.append(text[last:])
            assert replacer.replace(text) == "".join(expected)


def _reference_replace(text, table, mode):
    """逐一比對所有已接受區間的線性版本，用來對照 Replacer 的結果"""
    needles = [needle for needle in table if needle]
    if mode is OrderingMode.LENGTH_DESCENDING_THEN_LEXICOGRAPHIC:
        needles.sort(key=lambda needle: (-len(needle), needle))

    accepted = []
    for needle in needles:
        index = text.find(needle)
        while index != -1:
            start, end = index, index + len(needle) - 1
            if all(end < s or start > e for s, e, _ in accepted):
                accepted.append((start, end, table[needle]))
            index = text.find(needle, index + 1)

    parts = []
    last = 0
    for start, end, replacement in sorted(accepted):
        parts.append(text[last:start])
        parts.append(replacement)
        last = end + 1
    parts.append(text[last:])
    return "".join(parts)


class TestMatchesLinearReference:
    """與線性重疊檢查的版本比對結果"""

    @pytest.mark.parametrize("mode", list(OrderingMode))
    def test_randomized_tables(self, mode):
        rng = random.Random(7)
        alphabet = "ab"
        for _ in range(2000):
            text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 20)))
            table = {}
            for _ in range(rng.randint(1, 5)):
                needle = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 4)))
                table[needle] = "".join(rng.choice("XY") for _ in range(rng.randint(0, 2)))

            assert replace_using_map(text, table, mode) == _reference_replace(text, table, mode), (text, table)
