import pytest

from mod_agent.models import ModRecord


def make_record(name, title=None, factorio_version="0.15", author="someone"):
    return ModRecord(
        name=name,
        title=title or name,
        author=author,
        summary=f"Summary of {name}.",
        created_at="2017-01-01",
        updated_at="2017-06-01",
        downloads=100,
        latest_version="1.0.0",
        factorio_version=factorio_version,
        dependencies="No dependencies.",
        thumbnail_url="http://i.imgur.com/ckaei9P.png",
        link=f"https://mods.factorio.com/mods/{author}/{name}",
    )


def raw_result(name, title=None, factorio_version="0.15", owner="someone"):
    return {
        "name": name,
        "title": title or name,
        "owner": owner,
        "summary": f"Summary of {name}.",
        "downloads_count": 100,
        "created_at": "2017-01-01 00:00:00",
        "updated_at": "2017-06-01 00:00:00",
        "latest_release": {"version": "1.0.0", "factorio_version": factorio_version},
    }


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def raw_factory():
    return raw_result
