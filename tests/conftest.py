"""
Общие фикстуры: поддельные системные утилиты в PATH и настройки во временной директории
"""

import sys
from datetime import datetime

import pytest

from camera_diag.config.settings import DiagnosticSettings
from camera_diag.core.run_context import create_run_context, ensure_directories
from camera_diag.utils.command_runner import CommandRunner
from camera_diag.utils.logger import DiagnosticLogger

RUN_TIME = datetime(2026, 1, 2, 3, 4, 5)
RUN_STAMP = '20260102_030405'

FAKE_TOOL_TEMPLATE = '''#!{python}
import sys

args = sys.argv[1:]
with open({calls!r}, 'a', encoding='utf-8') as calls:
    calls.write({name!r} + ' ' + ' '.join(args) + '\\n')

for line in {stdout!r}:
    print(line, flush=True)
for line in {stderr!r}:
    print(line, file=sys.stderr, flush=True)

snapshot_bytes = {snapshot_bytes!r}
if snapshot_bytes is not None:
    for arg in args:
        if arg.startswith('--stream-to='):
            with open(arg[len('--stream-to='):], 'wb') as f:
                f.write(b'\\xff' * snapshot_bytes)

sys.exit({exit_code!r})
'''


class FakeBin:
    """Директория с поддельными утилитами, единственная в PATH"""

    def __init__(self, path):
        self.path = path
        self.calls_file = path / 'calls.log'

    def add(self, name, stdout=(), stderr=(), exit_code=0, snapshot_bytes=None):
        script = self.path / name
        script.write_text(FAKE_TOOL_TEMPLATE.format(
            python=sys.executable,
            calls=str(self.calls_file),
            name=name,
            stdout=list(stdout),
            stderr=list(stderr),
            exit_code=exit_code,
            snapshot_bytes=snapshot_bytes,
        ), encoding='utf-8')
        script.chmod(0o755)
        return script

    def calls(self):
        if not self.calls_file.exists():
            return []
        return self.calls_file.read_text(encoding='utf-8').splitlines()

    def calls_of(self, name):
        return [call for call in self.calls() if call.split(' ', 1)[0] == name]


@pytest.fixture
def fake_bin(tmp_path, monkeypatch):
    bin_dir = tmp_path / 'bin'
    bin_dir.mkdir()
    monkeypatch.setenv('PATH', str(bin_dir))
    return FakeBin(bin_dir)


@pytest.fixture
def camera_tools(fake_bin):
    """Все утилиты безусловных шагов; v4l2-ctl пишет снимок 2 МБ"""
    fake_bin.add('v4l2-ctl', stdout=['Driver name      : uvcvideo', 'Card type        : USB Camera'],
                 snapshot_bytes=2 * 1024 * 1024)
    fake_bin.add('ls', stdout=['crw-rw----+ 1 root video 81, 0 Jan  2 03:04 /dev/video0'])
    fake_bin.add('lsusb', stdout=['Bus 001 Device 003: ID 046d:0825 Logitech, Inc. Webcam C270'])
    fake_bin.add('dmesg', stdout=['[    1.0] usb 1-1: new high-speed USB device',
                                  '[    2.0] uvcvideo: Found UVC 1.00 device Webcam C270',
                                  '[    3.0] eth0: link up'])
    fake_bin.add('lsmod', stdout=['Module                  Size  Used by',
                                  'uvcvideo              98304  0',
                                  'videobuf2_v4l2         32768  1 uvcvideo'])
    fake_bin.add('cat', stdout=['processor\t: 0', 'Model\t\t: Raspberry Pi 4 Model B Rev 1.4'])
    fake_bin.add('uname', stdout=['Linux raspberrypi 6.1.21-v8+ aarch64 GNU/Linux'])
    fake_bin.add('grep', stdout=['start_x=1'])
    return fake_bin


@pytest.fixture
def settings(tmp_path):
    return DiagnosticSettings.from_dict({
        'log_dir': str(tmp_path / 'logs'),
        'snap_dir': str(tmp_path / 'snapshots'),
        'kernel_config': str(tmp_path / 'boot' / 'config-6.1.21-v8+'),
        'boot_config': str(tmp_path / 'boot' / 'config.txt'),
        'firmware_config': str(tmp_path / 'boot' / 'firmware' / 'config.txt'),
        'color': False,
    })


@pytest.fixture
def run_env(settings):
    """Контекст, логгер и исполнитель команд для одного запуска"""
    context = create_run_context(settings, now=RUN_TIME)
    ensure_directories(context)
    logger = DiagnosticLogger(context.main_log, use_color=False)
    runner = CommandRunner(context, logger)
    yield context, logger, runner
    logger.close()
