"""
Tests for the public application facade.
"""
import json
import threading
from unittest.mock import Mock

import pytest

from mod_agent import ModAgentApp, ModAgentConfig
from mod_agent.exceptions import AgentNotInitializedError, PrefixStoreLoadError
from mod_agent.service import ModAgentService


@pytest.fixture
def config(tmp_path):
    return ModAgentConfig(prefix_file_path=str(tmp_path / "prefixes.json"), max_workers=4)


@pytest.fixture
def catalog(raw_factory):
    catalog = Mock()
    catalog.search.side_effect = lambda query: {"results": [raw_factory(query)]}
    return catalog


@pytest.fixture
def app(config, catalog):
    app = ModAgentApp(config, service=ModAgentService(config, catalog=catalog))
    app.initialize()
    yield app
    app.shutdown()


class TestInitialization:
    """Startup behavior."""

    def test_use_before_initialize(self, config):
        app = ModAgentApp(config, service=ModAgentService(config, catalog=Mock()))

        with pytest.raises(AgentNotInitializedError):
            app.handle_message(1, "linkmod foo", Mock())
        with pytest.raises(AgentNotInitializedError):
            app.submit_message(1, "linkmod foo", Mock())

    def test_loads_persisted_prefixes(self, config, tmp_path):
        (tmp_path / "prefixes.json").write_text(json.dumps({"7": "$"}))
        app = ModAgentApp(config, service=ModAgentService(config, catalog=Mock()))

        app.initialize()

        assert app.service.prefix_store.get(7) == "$"
        app.shutdown()

    def test_malformed_prefix_file_aborts(self, config, tmp_path):
        (tmp_path / "prefixes.json").write_text("{broken")
        app = ModAgentApp(config, service=ModAgentService(config, catalog=Mock()))

        with pytest.raises(PrefixStoreLoadError):
            app.initialize()


class TestMessageHandling:
    """Synchronous and pooled dispatch."""

    def test_handle_message(self, app):
        sink = Mock()

        outcome = app.handle_message(1, "linkmod foobar", sink)

        assert outcome.success
        assert sink.send_card.call_args[0][0].title == "foobar"

    def test_concurrent_commands_answer_independently(self, app):
        sinks = {f"mod{i}": Mock() for i in range(20)}

        futures = [
            app.submit_message(i, f"linkmod {name}", sink)
            for i, (name, sink) in enumerate(sinks.items())
        ]
        outcomes = [f.result(timeout=10) for f in futures]

        assert all(o.success for o in outcomes)
        for name, sink in sinks.items():
            sink.send_card.assert_called_once()
            assert sink.send_card.call_args[0][0].title == name

    def test_setprefix_then_linkmod(self, app):
        app.handle_message(5, "setprefix !", Mock(), is_admin=True)

        assert app.handle_message(5, "linkmod foo", Mock()) is None
        assert app.handle_message(5, "!linkmod foo", Mock()).success

    def test_shutdown_backs_up_prefixes(self, config, catalog, tmp_path):
        app = ModAgentApp(config, service=ModAgentService(config, catalog=catalog))
        app.initialize()
        app.handle_message(9, "setprefix +", Mock(), is_admin=True)

        app.shutdown()

        assert json.loads((tmp_path / "prefixes.json").read_text()) == {"9": "+"}
