import itertools

from litreview.services.registry import MaterialRegistry


def test_add_preserves_arrival_order() -> None:
    registry = MaterialRegistry()
    a = registry.add("a.bib", "bibtex", "A")
    b = registry.add("10.1/x", "doi", "10.1/x")
    c = registry.add("c.pdf", "pdf", "C")

    assert [r.id for r in registry] == [a.id, b.id, c.id]
    assert len(registry) == 3


def test_ids_unique_under_rapid_adds() -> None:
    registry = MaterialRegistry()
    ids = {registry.add(f"f{i}", "pdf", "x").id for i in range(500)}
    assert len(ids) == 500


def test_colliding_id_factory_is_redrawn() -> None:
    counter = itertools.count()
    # Yields "same" twice before moving on
    sequence = iter(["same", "same", "other"])
    registry = MaterialRegistry(id_factory=lambda: next(sequence, f"id-{next(counter)}"))

    first = registry.add("a", "pdf", "a")
    second = registry.add("b", "pdf", "b")

    assert first.id == "same"
    assert second.id == "other"


def test_remove_and_unknown_id() -> None:
    registry = MaterialRegistry()
    a = registry.add("a", "pdf", "a")
    b = registry.add("b", "pdf", "b")

    assert registry.remove(a.id) is True
    assert registry.remove(a.id) is False
    assert registry.remove("nope") is False
    assert [r.id for r in registry] == [b.id]


def test_add_then_remove_sequence_keeps_order_and_uniqueness() -> None:
    registry = MaterialRegistry()
    kept = []
    for i in range(20):
        record = registry.add(str(i), "pdf", str(i))
        if i % 3 == 0:
            registry.remove(record.id)
        else:
            kept.append(record.id)

    ids = [r.id for r in registry]
    assert ids == kept
    assert len(set(ids)) == len(ids)


def test_empty_name_becomes_untitled() -> None:
    record = MaterialRegistry().add("", "pdf", "x")
    assert record.name == "Untitled"


def test_add_from_url_valid() -> None:
    registry = MaterialRegistry()
    registry.url_buffer = "  https://example.org/paper  "

    record = registry.add_from_url()

    assert record is not None
    assert record.category == "url"
    assert record.content == "https://example.org/paper"
    assert record.name == "https://example.org/paper"
    assert registry.url_buffer == ""


def test_add_from_url_rejects_malformed_and_clears_buffer() -> None:
    registry = MaterialRegistry()
    registry.add("a", "pdf", "a")
    before = registry.records
    registry.url_buffer = "not-a-url"

    assert registry.add_from_url() is None
    assert registry.records == before
    assert registry.url_buffer == ""


def test_add_from_url_ignores_blank_input() -> None:
    registry = MaterialRegistry()
    registry.url_buffer = "   "
    assert registry.add_from_url() is None
    assert len(registry) == 0


def test_clear() -> None:
    registry = MaterialRegistry()
    registry.add("a", "pdf", "a")
    registry.url_buffer = "https://x.org"
    registry.clear()
    assert len(registry) == 0
    assert registry.url_buffer == ""
