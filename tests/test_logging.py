"""
Tests for the APS logging module.
"""

import json

import pytest

import aps.logging as aps_logging
from aps.logging import (
    FileSink,
    LogLevel,
    NullSink,
    close_all_sinks,
    configure_logging,
    create_sink_for_module,
    emit_record,
    get_logger,
    get_sink,
    register_sink,
    set_default_sink,
)


@pytest.fixture(autouse=True)
def restore_config():
    saved = {
        'default_level': aps_logging._config['default_level'],
        'module_levels': dict(aps_logging._config['module_levels']),
        'log_dir': aps_logging._config['log_dir'],
        'modules': dict(aps_logging._config['modules']),
    }
    yield
    close_all_sinks()
    aps_logging._config.update(saved)


# ============================================================================
# Loggers
# ============================================================================


class TestLogger:

    def test_loggers_are_cached(self):
        assert get_logger('session') is get_logger('session')

    def test_message_format(self, capsys):
        configure_logging(level='INFO')
        get_logger('session').info("Started %s", "Robin")
        assert "[session] INFO: Started Robin" in capsys.readouterr().err

    def test_below_level_suppressed(self, capsys):
        configure_logging(level='WARNING')
        get_logger('session').info("quiet")
        assert capsys.readouterr().err == ""

    def test_module_level_override(self, capsys):
        configure_logging(level='WARNING', modules={'target_pool': 'DEBUG'})
        assert get_logger('target_pool').is_enabled_for(LogLevel.DEBUG)
        assert not get_logger('session').is_enabled_for(LogLevel.INFO)

    def test_bad_format_args_do_not_raise(self, capsys):
        configure_logging(level='INFO')
        get_logger('session').info("%d targets", "many")
        assert "targets" in capsys.readouterr().err

    def test_environment_configuration(self, monkeypatch, tmp_path):
        aps_logging._config['modules'] = {}
        monkeypatch.setenv('APS_LOG_LEVEL', 'warn')
        monkeypatch.setenv('APS_LOG_TARGET_POOL', 'DEBUG')
        monkeypatch.setenv('APS_LOG_DIR', str(tmp_path))
        monkeypatch.setenv('APS_LOGGING_SESSION_ENABLED', 'true')
        monkeypatch.setenv('APS_LOGGING_SESSION_DIR', str(tmp_path / "records"))
        aps_logging._load_env_config()

        assert aps_logging._config['default_level'] == LogLevel.WARNING
        assert get_logger('target_pool').is_enabled_for(LogLevel.DEBUG)
        assert 'dir' not in aps_logging._config['module_levels']
        assert aps_logging.get_module_config('session') == {
            'enabled': True,
            'dir': str(tmp_path / "records"),
        }
        assert aps_logging.get_log_dir() == tmp_path

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level='LOUD')
        assert aps_logging._config['default_level'] == LogLevel.INFO


# ============================================================================
# Sinks
# ============================================================================


class TestSinks:

    def test_emit_without_sink(self):
        set_default_sink(None)
        assert emit_record('nothing_registered', {'type': 'x'}) is False

    def test_register_and_emit(self):
        sink = NullSink()
        register_sink('session', sink)
        assert get_sink('session') is sink
        assert emit_record('session', {'type': 'start'}) is True

    def test_file_sink_writes_jsonl(self, tmp_path):
        sink = FileSink(log_dir=str(tmp_path), session_name="run1")
        sink.emit('session', {'type': 'game_over', 'score': 25})
        sink.close()

        lines = (tmp_path / "run1_session.jsonl").read_text().splitlines()
        records = [json.loads(line) for line in lines]
        assert records[0]['type'] == 'header'
        assert records[1]['type'] == 'game_over'
        assert records[1]['score'] == 25
        assert 'wall_time' in records[1]
        assert records[-1]['type'] == 'footer'

    def test_sink_disabled_by_default(self):
        aps_logging._config['modules'] = {}
        assert isinstance(create_sink_for_module('session'), NullSink)

    def test_sink_enabled_by_config(self, tmp_path):
        aps_logging._config['modules'] = {'session': {'enabled': True, 'dir': str(tmp_path)}}
        sink = create_sink_for_module('session', session_name="run2")
        assert isinstance(sink, FileSink)
        sink.emit('session', {'type': 'start'})
        sink.close()
        assert (tmp_path / "run2_session.jsonl").exists()
