"""
Сценарии полного запуска диагностики
"""

import shlex
from datetime import datetime
from pathlib import Path

from camera_diag.config.diagnostic_steps import BASIC_STEPS, CONDITIONAL_STEPS, SYSTEM_LOG_STEPS
from camera_diag.core.diagnostic_run import EXIT_MISSING_TOOL, EXIT_OK, DiagnosticRun
from camera_diag.main import main
from camera_diag.utils.image_capture import SnapshotCapture

RUN_TIME = datetime(2026, 1, 2, 3, 4, 5)


def step_banners(steps, verb):
    return [f'{verb}: {step.description}...' for step in steps]


def read_logs(run):
    main_log = run.context.main_log.read_text(encoding='utf-8')
    raw = run.context.output_log.read_text(encoding='utf-8') if run.context.output_log.exists() else ''
    return main_log, raw


def test_full_run_with_all_commands_succeeding(camera_tools, settings):
    run = DiagnosticRun(settings, now=RUN_TIME)

    assert run.run() == EXIT_OK

    snapshot = run.context.snapshot_path
    assert snapshot.is_file()
    assert snapshot.stat().st_size == 2 * 1024 * 1024

    main_log, raw = read_logs(run)
    assert '(Размер: 2.0M)' in main_log

    banners = (step_banners(BASIC_STEPS, 'Проверка')
               + ['Захват тестового снимка']
               + step_banners(SYSTEM_LOG_STEPS, 'Получение'))
    positions = [main_log.index(banner) for banner in banners]
    assert positions == sorted(positions)
    for banner in banners:
        assert main_log.count(banner) == 1

    capture_command = shlex.join(SnapshotCapture(run.context, run.runner, settings.capture).build_command())
    assert f'КОМАНДА: {capture_command}' in raw


def test_conditional_steps_skipped_silently(camera_tools, settings):
    run = DiagnosticRun(settings, now=RUN_TIME)

    assert run.run() == EXIT_OK

    main_log, raw = read_logs(run)
    for step in BASIC_STEPS + SYSTEM_LOG_STEPS:
        assert step.description in main_log
    for step in CONDITIONAL_STEPS:
        assert step.description not in main_log
    assert 'journalctl' not in raw
    assert camera_tools.calls_of('journalctl') == []
    assert camera_tools.calls_of('grep') == []


def test_conditional_steps_run_once_when_available(camera_tools, settings):
    camera_tools.add('journalctl', stdout=['Jan 02 kernel: uvcvideo: Found UVC 1.00 device'])
    for path in (settings.system.kernel_config, settings.system.boot_config,
                 settings.system.firmware_config):
        config = Path(path)
        config.parent.mkdir(parents=True, exist_ok=True)
        config.write_text('start_x=1\n', encoding='utf-8')

    run = DiagnosticRun(settings, now=RUN_TIME)
    assert run.run() == EXIT_OK

    main_log, raw = read_logs(run)
    for banner in step_banners(CONDITIONAL_STEPS, 'Проверка'):
        assert main_log.count(banner) == 1
    assert camera_tools.calls_of('journalctl') == ['journalctl -b']
    grep_calls = camera_tools.calls_of('grep')
    assert len(grep_calls) == 3
    assert grep_calls[0].endswith(settings.system.kernel_config)
    assert 'uvcvideo: Found UVC 1.00 device' in raw


def test_missing_required_tool_aborts(fake_bin, settings):
    fake_bin.add('lsusb')
    run = DiagnosticRun(settings, now=RUN_TIME)

    assert run.run() == EXIT_MISSING_TOOL

    main_log = run.context.main_log.read_text(encoding='utf-8')
    error_lines = [line for line in main_log.splitlines() if ' - ERROR - ' in line]
    assert len(error_lines) == 1
    assert 'sudo apt install v4l-utils' in error_lines[0]
    assert 'ВЫПОЛНЯЕТСЯ' not in main_log
    assert not run.context.output_log.exists()
    assert list(run.context.snap_dir.iterdir()) == []
    assert fake_bin.calls() == []


def test_failing_commands_do_not_change_exit_status(fake_bin, settings):
    for name in ('v4l2-ctl', 'ls', 'lsusb', 'dmesg', 'lsmod', 'cat', 'uname'):
        fake_bin.add(name, stderr=[f'{name}: Permission denied'], exit_code=1)

    run = DiagnosticRun(settings, now=RUN_TIME)
    assert run.run() == EXIT_OK

    main_log, raw = read_logs(run)
    assert 'Не удалось сделать снимок' in main_log
    assert run.runner.failed == run.runner.executed
    assert 'lsusb: Permission denied' in raw


def test_command_output_order_matches_in_terminal_and_logs(capsys, camera_tools, settings):
    run = DiagnosticRun(settings, now=RUN_TIME)
    run.run()

    stdout = capsys.readouterr().out
    main_log, raw = read_logs(run)
    lines = ['Bus 001 Device 003: ID 046d:0825 Logitech, Inc. Webcam C270',
             'uvcvideo: Found UVC 1.00 device Webcam C270',
             'uvcvideo              98304  0',
             'Model\t\t: Raspberry Pi 4 Model B Rev 1.4']
    for text in (stdout, main_log, raw):
        positions = [text.index(line) for line in lines]
        assert positions == sorted(positions)
    assert 'eth0: link up' not in raw


def test_main_entry_point(camera_tools, tmp_path):
    status = main(['--log-dir', str(tmp_path / 'out' / 'logs'),
                   '--snap-dir', str(tmp_path / 'out' / 'snapshots'),
                   '--kernel-config', str(tmp_path / 'none'),
                   '--boot-config', str(tmp_path / 'none'),
                   '--firmware-config', str(tmp_path / 'none'),
                   '--no-color'])

    assert status == 0
    assert len(list((tmp_path / 'out' / 'logs').glob('camera_diagnostic_*.log'))) == 1
    assert len(list((tmp_path / 'out' / 'snapshots').glob('snap_*.jpg'))) == 1


def test_main_reports_bad_config(tmp_path, capsys):
    config = tmp_path / 'bad.yaml'
    config.write_text('unknown_key: 1\n', encoding='utf-8')

    assert main(['--config', str(config)]) == 2
    assert 'unknown_key' in capsys.readouterr().err


def test_main_reports_bad_naming_config(camera_tools, tmp_path, capsys):
    naming = tmp_path / 'naming.yaml'
    naming.write_text("main_log_format: 'diag_{host}_{stamp}.log'\n", encoding='utf-8')

    status = main(['--log-dir', str(tmp_path / 'logs'), '--naming-config', str(naming)])

    assert status == 2
    assert str(naming) in capsys.readouterr().err
    assert not (tmp_path / 'logs').exists()
    assert camera_tools.calls() == []
