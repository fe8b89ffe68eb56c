from pytest import raises

from smartsort.collation import RootCollator
from smartsort.comparison import smart_sorted
from smartsort.error import LocaleError


def describe_smart_sorted():
    def sorts_in_natural_order():
        assert smart_sorted(["item2", "item10", "item1"], "root") == [
            "item1",
            "item2",
            "item10",
        ]

    def accepts_collator():
        assert smart_sorted(["b", "A", "a"], RootCollator()) == ["a", "A", "b"]

    def accepts_any_iterable():
        assert smart_sorted((f"x{i}" for i in (3, 20, 1)), "root") == [
            "x1",
            "x3",
            "x20",
        ]

    def sorts_other_objects_by_string_form():
        assert smart_sorted([10, 9, None, "8"], "root") == ["8", 9, 10, None]

    def sorts_with_key_and_in_reverse():
        records = [{"name": "v2"}, {"name": "v10"}, {"name": "v1"}]
        assert smart_sorted(
            records, "root", key=lambda record: record["name"], reverse=True
        ) == [{"name": "v10"}, {"name": "v2"}, {"name": "v1"}]

    def uses_environment_locale_by_default():
        assert smart_sorted(["a10", "a9"]) == ["a9", "a10"]

    def rejects_unknown_locale():
        with raises(LocaleError):
            smart_sorted(["a"], "qq_QQ")
