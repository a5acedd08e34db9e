import pytest
from mod_agent.canonicalizer import (
    PLACEHOLDER_THUMBNAIL,
    ModCanonicalizer,
    filter_supported,
    parse_version,
    summarize_dependencies,
)


def raw_mod(**overrides):
    raw = {
        "name": "bobinserters",
        "title": "Bob's Adjustable Inserters",
        "owner": "Bobingabout",
        "summary": "Lets you adjust inserter pickup and drop locations.",
        "downloads_count": 123456,
        "created_at": "2016-03-01 12:34:56.123",
        "updated_at": "2017-05-04 01:02:03",
        "latest_release": {
            "version": "0.15.2",
            "factorio_version": "0.15",
            "info_json": {"dependencies": ["base >= 0.15.0", "? boblibrary", "? bobtech"]},
        },
        "homepage": "https://forums.factorio.com/viewforum.php?f=51",
        "github_path": "modded-factorio/bobsmods",
        "first_media_file": {"urls": {"thumb": "https://example.com/thumb.png"}},
        "tags": [{"title": "Logistics"}, {"title": "Cheats"}],
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def canonicalizer():
    return ModCanonicalizer()


def test_parse_full_record(canonicalizer):
    mod = canonicalizer.parse_mod(raw_mod())

    assert mod.name == "bobinserters"
    assert mod.title == "Bob's Adjustable Inserters"
    assert mod.author == "Bobingabout"
    assert mod.downloads == 123456
    assert mod.created_at == "2016-03-01"
    assert mod.updated_at == "2017-05-04"
    assert mod.latest_version == "0.15.2"
    assert mod.factorio_version == "0.15"
    assert mod.thumbnail_url == "https://example.com/thumb.png"
    assert mod.homepage_url == "https://forums.factorio.com/viewforum.php?f=51"
    assert mod.source_url == "https://github.com/modded-factorio/bobsmods"
    assert mod.tag == "Logistics"
    assert mod.link == "https://mods.factorio.com/mods/Bobingabout/bobinserters"
    assert mod.dependencies == "base >= 0.15.0\n...and 2 optional dependencies."


def test_empty_record_uses_fallbacks(canonicalizer):
    mod = canonicalizer.parse_mod({})

    assert mod.thumbnail_url == PLACEHOLDER_THUMBNAIL
    assert mod.homepage_url is None
    assert mod.source_url is None
    assert mod.dependencies == "No dependencies."
    assert mod.tag is None
    assert mod.downloads == 0
    # Every text field is populated
    for value in (mod.name, mod.title, mod.author, mod.summary, mod.created_at,
                  mod.updated_at, mod.latest_version, mod.factorio_version, mod.link):
        assert value


@pytest.mark.parametrize("raw", [None, [], "oops", 42])
def test_non_object_record_never_raises(canonicalizer, raw):
    mod = canonicalizer.parse_mod(raw)
    assert mod.dependencies == "No dependencies."


def test_malformed_fields_degrade(canonicalizer):
    mod = canonicalizer.parse_mod(raw_mod(
        downloads_count="lots",
        homepage="",
        github_path="",
        tags=[],
        first_media_file=None,
        latest_release="1.0",
    ))

    assert mod.downloads == 0
    assert mod.homepage_url is None
    assert mod.source_url is None
    assert mod.tag is None
    assert mod.thumbnail_url == PLACEHOLDER_THUMBNAIL
    assert mod.dependencies == "No dependencies."


def test_negative_downloads_clamped(canonicalizer):
    assert canonicalizer.parse_mod(raw_mod(downloads_count=-5)).downloads == 0


def test_link_encodes_spaces(canonicalizer):
    mod = canonicalizer.parse_mod(raw_mod(owner="Some Author", name="my mod"))
    assert mod.link == "https://mods.factorio.com/mods/Some%20Author/my%20mod"


def test_link_uses_configured_host():
    mod = ModCanonicalizer(catalog_host="mods.example.org").parse_mod(raw_mod())
    assert mod.link.startswith("https://mods.example.org/mods/")


def test_dependency_pluralization():
    assert summarize_dependencies(["base", "? extra"]) == "base\n...and 1 optional dependency."
    assert summarize_dependencies(["?a", "?b"]) == "...and 2 optional dependencies."
    assert summarize_dependencies(["base", "other"]) == "base\nother\n"
    assert summarize_dependencies([]) == "No dependencies."
    assert summarize_dependencies(None) == "No dependencies."


def test_parse_all_keeps_order_and_limit(canonicalizer):
    document = {"results": [raw_mod(name=f"mod{i}") for i in range(15)]}

    records = canonicalizer.parse_all(document, limit=10)

    assert [r.name for r in records] == [f"mod{i}" for i in range(10)]


@pytest.mark.parametrize("document", [{}, {"results": None}, {"results": "x"}, [], None])
def test_parse_all_without_results(canonicalizer, document):
    assert canonicalizer.parse_all(document) == []


def test_parse_all_skips_non_objects(canonicalizer):
    records = canonicalizer.parse_all({"results": [raw_mod(), "junk", None]})
    assert len(records) == 1


def test_version_filter(canonicalizer):
    records = [
        canonicalizer.parse_mod(raw_mod(name="old", latest_release={"factorio_version": "0.14"})),
        canonicalizer.parse_mod(raw_mod(name="edge", latest_release={"factorio_version": "0.15"})),
        canonicalizer.parse_mod(raw_mod(name="new", latest_release={"factorio_version": "1.1"})),
        canonicalizer.parse_mod(raw_mod(name="bad", latest_release={"factorio_version": "latest"})),
    ]

    kept = filter_supported(records, 0.15)

    assert [r.name for r in kept] == ["edge", "new"]
    assert parse_version("latest") == 0.0
