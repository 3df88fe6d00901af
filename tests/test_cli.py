import importlib
import sys

import pytest

# run.py is imported as a module; parse_args + main are exercised with a
# patched start_server so no networking happens.


@pytest.fixture()
def run_module():
    if 'run' in sys.modules:
        del sys.modules['run']
    return importlib.import_module('run')


def test_version_flag_outputs_version(run_module, capsys):
    from burrow import __version__

    with pytest.raises(SystemExit) as exc:
        run_module.parse_args(['--version'])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert __version__ in out
    assert 'Burrow Dungeon Generator' in out


def test_default_command_is_generate(run_module):
    ns = run_module.parse_args([])
    assert ns.command == 'generate'
    assert ns.count == 1


def test_generate_writes_pngs(run_module, tmp_path):
    code = run_module.main(['generate', '--count', '2', '--seed', '10', '--out', str(tmp_path), '--areas', '3'])
    assert code == 0
    assert (tmp_path / 'img_0.png').exists()
    assert (tmp_path / 'img_1.png').exists()


def test_generate_ascii_is_seeded(run_module, capsys):
    assert run_module.main(['generate', '--seed', '3', '--ascii', '--areas', '2']) == 0
    first = capsys.readouterr().out
    assert run_module.main(['generate', '--seed', '3', '--ascii', '--areas', '2']) == 0
    second = capsys.readouterr().out
    assert '# seed=3' in first

    def grid(out):
        return [line for line in out.splitlines() if line and set(line) <= {'.', '#'}]

    assert grid(first) and grid(first) == grid(second)


@pytest.mark.parametrize(
    'argv',
    [
        ['generate', '--generator', 'maze'],
        ['generate', '--count', '0'],
        ['generate', '--scale', '0'],
    ],
)
def test_generate_rejects_bad_options(run_module, argv, capsys):
    assert run_module.main(argv) == 2
    assert '[ERROR]' in capsys.readouterr().err


def test_server_main_invokes_start_server(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls['host'] = host
        calls['port'] = port
        calls['debug'] = debug

    monkeypatch.setattr(run_module.signal, 'signal', lambda *a: None)
    monkeypatch.setenv('PORT', '5555')
    monkeypatch.setenv('HOST', '127.0.0.1')
    import burrow.server as server_mod

    monkeypatch.setattr(server_mod, 'start_server', fake_start_server)
    assert run_module.main(['server']) == 0
    assert calls == {'host': '127.0.0.1', 'port': 5555, 'debug': False}


def test_server_flags_override_env(monkeypatch, run_module):
    calls = {}

    def fake_start_server(host, port, debug):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setattr(run_module.signal, 'signal', lambda *a: None)
    monkeypatch.setenv('PORT', '5555')
    import burrow.server as server_mod

    monkeypatch.setattr(server_mod, 'start_server', fake_start_server)
    run_module.main(['server', '--port', '8081', '--host', '0.0.0.0', '--debug'])
    assert calls == {'host': '0.0.0.0', 'port': 8081, 'debug': True}


def test_env_file_argument(monkeypatch, tmp_path, run_module):
    env_file = tmp_path / '.env'
    env_file.write_text('BURROW_AREA_COUNT=2\n')
    monkeypatch.delenv('BURROW_AREA_COUNT', raising=False)
    out = tmp_path / 'out'
    assert run_module.main(['--env-file', str(env_file), 'generate', '--seed', '1', '--out', str(out)]) == 0
    assert (out / 'img_0.png').exists()
