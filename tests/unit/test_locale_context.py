"""Language switching through the locale context."""

from __future__ import annotations

import asyncio

from langswitch.i18n import LocaleContext, create_locale_context

from .sources import RecordingSource, malformed

FRENCH = {"Table.Id": "Identifiant"}


def test_change_language_loads_then_activates() -> None:
    context = create_locale_context(RecordingSource({"fr": FRENCH}))

    asyncio.run(context.change_language("fr"))

    assert context.loader.loaded == frozenset({"fr"})
    assert context.registry.get_locale_message("fr") == FRENCH
    assert context.locale == "fr"
    assert context.t("Table.Id") == "Identifiant"


def test_active_locale_never_precedes_registration() -> None:
    context = create_locale_context(RecordingSource({"fr": FRENCH}))
    observed: list[bool] = []
    context.registry.locale.subscribe(
        lambda new, old: observed.append(context.registry.has_locale(new))
    )

    asyncio.run(context.change_language("fr"))

    assert observed == [True]


def test_revalidation_runs_after_the_switch() -> None:
    context = create_locale_context(RecordingSource({"fr": FRENCH}))
    seen: list[str] = []
    context.add_revalidator(lambda: seen.append(context.locale))

    asyncio.run(context.change_language("fr"))

    assert seen == ["fr"]


def test_async_revalidators_are_awaited() -> None:
    context = create_locale_context(RecordingSource({"fr": FRENCH}))
    seen: list[str] = []

    async def revalidate() -> None:
        await asyncio.sleep(0)
        seen.append(context.locale)

    context.add_revalidator(revalidate)
    asyncio.run(context.change_language("fr"))

    assert seen == ["fr"]


def test_removed_revalidator_is_not_called() -> None:
    context = create_locale_context(RecordingSource({"fr": FRENCH}))
    seen: list[str] = []
    remove = context.add_revalidator(lambda: seen.append("called"))

    remove()
    asyncio.run(context.change_language("fr"))

    assert seen == []


def test_broken_bundle_still_switches_and_shows_raw_keys() -> None:
    context = create_locale_context(RecordingSource(errors={"de": malformed("de")}))

    asyncio.run(context.change_language("de"))

    assert context.locale == "de"
    assert context.registry.get_locale_message("de") == {}
    assert context.t("Table.Id") == "Table.Id"


def test_switching_back_uses_the_cached_bundle() -> None:
    source = RecordingSource({"en": {"Table.Id": "ID"}, "fr": FRENCH})
    context = create_locale_context(source)

    async def scenario() -> None:
        await context.ensure_loaded("en")
        await context.change_language("fr")
        await context.change_language("en")

    asyncio.run(scenario())

    assert source.calls == ["en", "fr"]
    assert context.t("Table.Id") == "ID"


def test_context_exposes_its_collaborators() -> None:
    context = create_locale_context(RecordingSource(), locale="fr", fallback_locale="en")

    assert isinstance(context, LocaleContext)
    assert context.locale == "fr"
    assert context.registry.fallback_locale == "en"
    assert context.loader.registry is context.registry
