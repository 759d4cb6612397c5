import pytest

from cue2json.exceptions import Cue2JsonError, EngineError, EngineInitError
from cue2json.session import ParserSession, create_session


def test_create_session_initializes_engine(engine_factory, engines):
    session = create_session(engine_factory)
    assert engines[0].calls == ["initialize"]
    assert not session.closed


def test_init_failure_shuts_down_before_raising(engine_factory, engines):
    with pytest.raises(EngineInitError) as excinfo:
        create_session(lambda: engine_factory(fail_init=True))
    assert engines[0].calls == ["initialize", "shutdown"]
    assert "browser failed to launch" in str(excinfo.value)


def test_shutdown_is_idempotent(engine_factory, engines):
    session = create_session(engine_factory)
    session.shutdown()
    session.shutdown()
    assert engines[0].calls.count("shutdown") == 1
    assert session.closed


def test_context_manager_shuts_down_on_error(engine_factory, engines, vtt_file):
    with pytest.raises(EngineError):
        with create_session(lambda: engine_factory(fail_on={"Hello"})) as session:
            session.parse_file(str(vtt_file))
    assert engines[0].calls[-1] == "shutdown"


def test_parse_file_flushes(engine_factory, engines, vtt_file):
    with create_session(engine_factory) as session:
        result = session.parse_file(str(vtt_file))
    assert engines[0].calls[:3] == ["initialize", "parse", "flush"]
    assert [cue["text"] for cue in result["cues"]] == ["Hello world", "Second cue"]


def test_chunked_parse_matches_single_parse(engine_factory, vtt_file):
    text = vtt_file.read_text(encoding="utf-8")

    with create_session(engine_factory) as session:
        whole = session.parse_file(str(vtt_file))

    engine = engine_factory()
    middle = len(text) // 2
    engine.parse(text[:middle])
    engine.parse(text[middle:])
    assert engine.flush() == whole
    assert [cue["text"] for cue in whole["cues"]] == ["Hello world", "Second cue"]


def test_process_file_uses_processing_model(engine_factory, engines, vtt_file):
    with create_session(engine_factory) as session:
        result = session.process_file(str(vtt_file))
    assert "process" in engines[0].calls
    assert "parse" not in engines[0].calls
    assert result["tagName"] == "DIV"


def test_clear_resets_between_files(engine_factory, vtt_file):
    with create_session(engine_factory) as session:
        first = session.parse_file(str(vtt_file))
        session.clear()
        second = session.parse_file(str(vtt_file))
    assert first == second


def test_missing_file_raises(engine_factory, tmp_path):
    session = ParserSession(engine_factory())
    with pytest.raises(Cue2JsonError):
        session.parse_file(str(tmp_path / "missing.vtt"))
