import locale
from threading import Thread

from pytest import raises, warns

from smartsort.collation import (
    LocaleCollator,
    RootCollator,
    get_collator,
    locale_collator,
    resolve_locale_name,
)
from smartsort.error import LocaleError, SmartSortError


def current_collation() -> str:
    return locale.setlocale(locale.LC_COLLATE)


def describe_locale_collator():
    def uses_code_points_in_c_locale():
        collator = LocaleCollator("C")
        assert collator.locale_name == "C"
        assert collator.compare("B", "a") < 0
        assert collator.compare("a", "B") > 0
        assert collator.compare("a", "a") == 0

    def can_be_represented():
        assert repr(LocaleCollator("C")) == "LocaleCollator('C')"

    def ignores_embedded_null_characters():
        collator = LocaleCollator("C")
        assert collator.compare("a\0b", "ab") == 0
        assert collator.compare("a\0c", "ab") > 0

    def does_not_change_the_process_locale():
        before = current_collation()
        collator = LocaleCollator("C")
        collator.compare("x", "y")
        assert current_collation() == before

    def can_be_used_from_several_threads():
        collator = LocaleCollator("C")
        results = []

        def compare_many():
            results.append(all(collator.compare("b", "a") > 0 for _ in range(200)))

        threads = [Thread(target=compare_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert results == [True] * 4

    def rejects_unknown_locales():
        with raises(LocaleError) as exc_info:
            LocaleCollator("qq_QQ")
        error = exc_info.value
        assert isinstance(error, SmartSortError)
        assert isinstance(error, ValueError)
        assert error.locale_id == "qq_QQ"
        assert str(error) == "Locale 'qq_QQ' is not available."
        assert isinstance(error.__cause__, locale.Error)

    def rejects_locales_with_null_characters():
        with raises(LocaleError) as exc_info:
            LocaleCollator("de\0DE")
        error = exc_info.value
        assert error.locale_id == "de\0DE"
        assert isinstance(error.__cause__, ValueError)


def describe_resolve_locale_name():
    def resolves_installed_locales():
        assert resolve_locale_name("C") == "C"

    def leaves_process_locale_alone():
        before = current_collation()
        resolve_locale_name("C")
        with raises(LocaleError):
            resolve_locale_name("qq_QQ")
        assert current_collation() == before


def describe_get_collator():
    def gets_root_collator():
        assert isinstance(get_collator("root"), RootCollator)
        assert isinstance(get_collator("ROOT"), RootCollator)
        assert isinstance(get_collator("und"), RootCollator)
        assert isinstance(get_collator(""), RootCollator)

    def gets_locale_collator():
        collator = get_collator("C")
        assert isinstance(collator, LocaleCollator)
        assert collator.locale_name == "C"

    def rejects_unknown_locales():
        with raises(LocaleError):
            get_collator("qq_QQ")
        with raises(LocaleError):
            get_collator("no such locale")
        with raises(LocaleError):
            get_collator("de\0DE")

    def gets_collator_for_environment():
        collator = get_collator()
        assert isinstance(collator, (LocaleCollator, RootCollator))
        assert collator.compare("a", "a") == 0

    def uses_locale_from_environment(monkeypatch):
        monkeypatch.setattr(locale_collator, "_probe_locale_name", lambda name: "C")
        collator = get_collator()
        assert isinstance(collator, LocaleCollator)
        assert collator.locale_name == "C"

    def falls_back_to_root_collator_with_warning(monkeypatch):
        def probe_locale_name(name):
            raise locale.Error("unsupported locale setting")

        monkeypatch.setattr(locale_collator, "_probe_locale_name", probe_locale_name)
        with warns(RuntimeWarning, match="not available"):
            collator = get_collator()
        assert isinstance(collator, RootCollator)
