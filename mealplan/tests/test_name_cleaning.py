import asyncio

import pytest

from mealplan.logic.shopping.name_cleaning import (
    REASON_COUNT_MISMATCH, REASON_ERROR, REASON_INVALID_ENTRY, REASON_TIMEOUT, REASON_UNCONFIGURED,
    NoOpNameCleaner, clean_names_with_fallback,
)


class FakeCleaner:
    """Answers with a canned reply (or a function of the input) and records calls."""

    def __init__(self, reply=None, delay=0.0, error=None):
        self.reply = reply
        self.delay = delay
        self.error = error
        self.calls = []

    async def clean_names(self, names, translate=False):
        self.calls.append((list(names), translate))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply(names) if callable(self.reply) else self.reply


NAMES = ["Garlic", "Tomatoes, seeds removed"]


@pytest.mark.asyncio
async def test_cleaned_names_returned_stripped():
    cleaner = FakeCleaner(reply=[" garlic ", "tomato"])
    result = await clean_names_with_fallback(NAMES, cleaner, timeout=1)
    assert result.names == ["garlic", "tomato"]
    assert not result.degraded
    assert cleaner.calls == [(NAMES, False)]


@pytest.mark.asyncio
async def test_empty_input_skips_cleaner():
    cleaner = FakeCleaner(reply=[])
    result = await clean_names_with_fallback([], cleaner, timeout=1)
    assert result.names == []
    assert cleaner.calls == []


@pytest.mark.asyncio
async def test_unconfigured_falls_back():
    result = await clean_names_with_fallback(NAMES, None, timeout=1)
    assert result.names == NAMES
    assert result.degraded_reason == REASON_UNCONFIGURED


@pytest.mark.asyncio
async def test_error_falls_back():
    result = await clean_names_with_fallback(NAMES, FakeCleaner(error=RuntimeError("boom")), timeout=1)
    assert result.names == NAMES
    assert result.degraded_reason == REASON_ERROR


@pytest.mark.asyncio
async def test_timeout_falls_back():
    result = await clean_names_with_fallback(NAMES, FakeCleaner(reply=["a", "b"], delay=5), timeout=0.05)
    assert result.names == NAMES
    assert result.degraded_reason == REASON_TIMEOUT


@pytest.mark.asyncio
async def test_count_mismatch_falls_back():
    result = await clean_names_with_fallback(NAMES, FakeCleaner(reply=["garlic"]), timeout=1)
    assert result.names == NAMES
    assert result.degraded_reason == REASON_COUNT_MISMATCH

    result = await clean_names_with_fallback(NAMES, FakeCleaner(reply="garlic\ntomato"), timeout=1)
    assert result.degraded_reason == REASON_COUNT_MISMATCH


@pytest.mark.asyncio
async def test_blank_or_non_text_entries_fall_back():
    for reply in (["garlic", "  "], ["garlic", None], ["garlic", 3]):
        result = await clean_names_with_fallback(NAMES, FakeCleaner(reply=reply), timeout=1)
        assert result.names == NAMES
        assert result.degraded_reason == REASON_INVALID_ENTRY


@pytest.mark.asyncio
async def test_translate_flag_forwarded():
    cleaner = FakeCleaner(reply=lambda names: list(names))
    await clean_names_with_fallback(["番茄"], cleaner, timeout=1, translate=True)
    assert cleaner.calls == [(["番茄"], True)]


@pytest.mark.asyncio
async def test_noop_cleaner_is_identity():
    result = await clean_names_with_fallback(NAMES, NoOpNameCleaner(), timeout=1)
    assert result.names == NAMES
    assert not result.degraded
