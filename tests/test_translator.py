import asyncio

import pytest

from fast_translation.config import TranslationConfig


@pytest.mark.asyncio
async def test_missing_key_returns_key(make_translator):
    translator = make_translator(fallback="de")

    assert await translator.get("messages.nope") == "messages.nope"
    assert await translator.get("courier::mail.nope") == "courier::mail.nope"
    assert await translator.get("") == ""


@pytest.mark.asyncio
async def test_replacements(make_translator, database, sample_data):
    database.lines[("messages", "en")] = {"greeting": "Hello, {name}!", "shout": "HEY {NAME}", "cap": "{Name} in {city}"}
    translator = make_translator()

    assert await translator.get("messages.greeting", {"name": "Ada"}) == "Hello, Ada!"
    assert await translator.get("messages.greeting", {"other": "x"}) == "Hello, {name}!"
    assert await translator.get("messages.shout", {"name": "ada"}) == "HEY ADA"
    assert await translator.get("messages.cap", {"name": "ada", "city": sample_data["city"]}) == f"Ada in {sample_data['city']}"


@pytest.mark.asyncio
async def test_backend_loaded_once_per_triple(make_translator, database):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator()

    assert await translator.get("messages.welcome") == "Welcome"
    assert await translator.get("messages.welcome") == "Welcome"
    assert await translator.get("messages.other") == "messages.other"

    assert database.calls == [("en", "messages", None)]


@pytest.mark.asyncio
async def test_loaded_lines_are_not_refreshed_within_lifetime(make_translator, database):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator()
    await translator.get("messages.welcome")

    database.lines[("messages", "en")] = {"welcome": "Changed"}

    assert await translator.get("messages.welcome") == "Welcome"


@pytest.mark.asyncio
async def test_concurrent_gets_share_one_load(make_translator, database):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator()

    results = await asyncio.gather(*[translator.get("messages.welcome") for _ in range(5)])

    assert results == ["Welcome"] * 5
    assert len(database.calls) == 1


@pytest.mark.asyncio
async def test_namespaced_keys_use_files_only(make_translator, files, database, cache):
    files.lines[("courier", "mail", "en")] = {"subject": "Your parcel"}
    translator = make_translator(config=TranslationConfig(debug_mode=False))

    assert await translator.get("courier::mail.subject") == "Your parcel"
    assert await translator.get("courier::mail.missing") == "courier::mail.missing"

    assert files.calls == [("en", "mail", "courier")]
    assert database.calls == []
    assert database.missing == []
    assert cache.store == {}


@pytest.mark.asyncio
async def test_star_namespace_is_default(make_translator, database):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator()

    assert await translator.get("*::messages.welcome") == "Welcome"
    assert database.calls == [("en", "messages", None)]


@pytest.mark.asyncio
async def test_debug_mode_bypasses_long_lived_cache(make_translator, database, cache):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator(config=TranslationConfig(debug_mode=True))

    await translator.get("messages.welcome")

    assert cache.store == {}
    assert database.calls == [("en", "messages", None)]


@pytest.mark.asyncio
@pytest.mark.parametrize("config", [
    TranslationConfig(debug_mode=False),
    TranslationConfig(debug_mode=True, minimal_mode=True),
])
async def test_long_lived_cache_wraps_database(make_translator, database, cache, config):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}

    assert await make_translator(config=config).get("messages.welcome") == "Welcome"
    assert cache.store["translations.en.messages"] == {"welcome": "Welcome"}

    # A second process (fresh translator) is served from the cache
    database.lines[("messages", "en")] = {"welcome": "Changed"}
    assert await make_translator(config=config).get("messages.welcome") == "Welcome"
    assert database.calls == [("en", "messages", None)]


@pytest.mark.asyncio
async def test_file_fallback_for_empty_database_group(make_translator, files, database, cache):
    files.lines[(None, "legacy", "en")] = {"title": "From file"}
    config = TranslationConfig(debug_mode=False, file_fallback=True)

    assert await make_translator(config=config).get("legacy.title") == "From file"
    assert cache.store["translations.en.legacy"] == {"title": "From file"}

    database.lines[("legacy", "en")] = {"title": "From database"}
    assert await make_translator(config=config).get("legacy.title") == "From file"
    assert files.calls == [("en", "legacy", None)]
    assert database.calls == [("en", "legacy", None)]


@pytest.mark.asyncio
async def test_no_file_fallback_when_disabled(make_translator, files, database):
    files.lines[(None, "legacy", "en")] = {"title": "From file"}
    translator = make_translator(config=TranslationConfig(debug_mode=True, file_fallback=False))

    assert await translator.get("legacy.title") == "legacy.title"
    assert files.calls == []


@pytest.mark.asyncio
async def test_locale_fallback_records_each_miss(make_translator, database):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator(locale="de", fallback="en")

    assert await translator.get("messages.welcome", locale="fr") == "Welcome"

    assert database.calls == [("fr", "messages", None), ("en", "messages", None)]
    assert database.missing == [("fr", "messages", "messages.welcome")]


@pytest.mark.asyncio
async def test_first_locale_hit_stops_chain(make_translator, database):
    database.lines[("messages", "de")] = {"welcome": "Willkommen"}
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator(locale="de", fallback="en")

    assert await translator.get("messages.welcome") == "Willkommen"
    assert database.calls == [("de", "messages", None)]
    assert database.missing == []


@pytest.mark.asyncio
async def test_total_miss_records_every_locale(make_translator, database):
    translator = make_translator(locale="de", fallback="en")

    assert await translator.get("messages.gone") == "messages.gone"
    assert database.missing == [
        ("de", "messages", "messages.gone"),
        ("en", "messages", "messages.gone"),
    ]

    await translator.get("messages.gone")
    assert len(database.missing) == 4


@pytest.mark.asyncio
async def test_without_fallback_only_requested_locale(make_translator, database):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator(locale="de", fallback="en")

    assert await translator.get("messages.welcome", fallback=False) == "messages.welcome"
    assert await translator.has_for_locale("messages.welcome") is False
    assert await translator.has("messages.welcome") is True


@pytest.mark.asyncio
async def test_nested_lines(make_translator, database):
    database.lines[("auth", "en")] = {"errors": {"failed": "Login failed for {user}", "throttle": "Slow down"}}
    translator = make_translator()

    assert await translator.get("auth.errors.failed", {"user": "ada"}) == "Login failed for ada"
    assert await translator.get("auth.errors", {"user": "ada"}) == {
        "failed": "Login failed for ada",
        "throttle": "Slow down",
    }


@pytest.mark.asyncio
async def test_non_string_line_is_a_miss(make_translator, database):
    database.lines[("messages", "en")] = {"count": 3, "empty": {}}
    translator = make_translator()

    assert await translator.get("messages.count") == "messages.count"
    assert await translator.get("messages.empty") == "messages.empty"


@pytest.mark.asyncio
async def test_choice(make_translator, database):
    database.lines[("cart", "en")] = {
        "items": "none|one|many",
        "apples": "{count} apple|{count} apples",
        "ranges": "{0} empty|[1,19] some|[20,*] lots of {what}",
    }
    translator = make_translator()

    assert await translator.choice("cart.items", 0) == "none"
    assert await translator.choice("cart.items", 1) == "one"
    assert await translator.choice("cart.items", 5) == "many"
    assert await translator.choice("cart.apples", 1) == "1 apple"
    assert await translator.choice("cart.apples", ["a", "b"]) == "2 apples"
    assert await translator.choice("cart.ranges", 25, {"what": "stuff"}) == "lots of stuff"
    assert await translator.choice("cart.missing", 2) == "cart.missing"


@pytest.mark.asyncio
async def test_choice_replaces_after_selecting_variant(make_translator, database):
    database.lines[("cart", "en")] = {
        "owners": "{name} has one|{name} has many",
        "items": "{name} item|{name} items",
        "summary": {"title": "{count} for {name}"},
    }
    translator = make_translator()

    assert await translator.choice("cart.owners", 5, {"name": "A|B"}) == "A|B has many"
    assert await translator.choice("cart.owners", 1, {"name": "A|B"}) == "A|B has one"
    assert await translator.choice("cart.items", 5, {"name": "[1,9]"}) == "[1,9] items"
    assert await translator.choice("cart.summary", 2, {"name": "Ada"}) == {"title": "2 for Ada"}


@pytest.mark.asyncio
async def test_load_locks_are_released(make_translator, database):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator()

    await asyncio.gather(*[translator.get("messages.welcome") for _ in range(3)])
    assert translator._load_locks == {}

    async def broken(*args, **kwargs):
        raise ConnectionError("database unreachable")

    database.load = broken
    with pytest.raises(ConnectionError):
        await translator.get("other.line")
    assert translator._load_locks == {}


@pytest.mark.asyncio
async def test_trans_records_editing_lines(make_translator, database):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator()

    await translator.trans("messages.welcome")
    assert translator.editing_lines == {}

    translator.editing = True
    await translator.trans("messages.welcome")
    await translator.trans("messages.unknown")
    assert translator.editing_lines == {"messages.welcome": "Welcome", "messages.unknown": "messages.unknown"}


@pytest.mark.asyncio
async def test_add_lines_skips_backends(make_translator, database):
    translator = make_translator()
    translator.add_lines({"messages.welcome": "Hi there", "messages.bye": "Bye"}, "en")

    assert await translator.get("messages.welcome") == "Hi there"
    assert database.calls == []


@pytest.mark.asyncio
async def test_forget_cached_reloads(make_translator, database, cache):
    database.lines[("messages", "en")] = {"welcome": "Welcome"}
    translator = make_translator(config=TranslationConfig(debug_mode=False))
    await translator.get("messages.welcome")

    database.lines[("messages", "en")] = {"welcome": "Hello"}
    await translator.forget_cached("en", "messages")

    assert await translator.get("messages.welcome") == "Hello"
    assert len(database.calls) == 2


@pytest.mark.asyncio
async def test_collaborator_errors_propagate(make_translator, database):
    async def broken(*args, **kwargs):
        raise ConnectionError("database unreachable")

    database.load = broken
    translator = make_translator()

    with pytest.raises(ConnectionError):
        await translator.get("messages.welcome")
    assert not translator.loaded.is_loaded(None, "messages", "en")


def test_invalid_locale(make_translator):
    translator = make_translator()
    with pytest.raises(ValueError):
        translator.set_locale("../etc")


def test_parse_key_is_memoised(make_translator):
    translator = make_translator()
    translator.set_parsed_key("custom", ("pkg", "group", "item"))

    assert translator.parse_key("custom") == ("pkg", "group", "item")
    assert translator.parse_key("a::b.c") == ("a", "b", "c")
