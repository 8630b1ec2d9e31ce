"""Runs the command line wrapper as a separate process to check its exit status."""

import os
import subprocess
import sys

from txdb_build.checksum import write_checksum_file

repo_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
script = os.path.join(repo_dir, 'bin', 'txdb_build', 'build_tx_db_pass2.py')


def run_script(*args, **environment):
    env = {name: value for name, value in os.environ.items()
           if name not in ('DATA_DIR', 'GENOME_RELEASE', 'CDOT_FILENAME')}
    env['PYTHONPATH'] = repo_dir + os.pathsep + env.get('PYTHONPATH', '')
    env.update(environment)
    return subprocess.run([sys.executable, script, *args], env=env, capture_output=True, text=True)


def write_previous_run(data_dir):
    output_dir = os.path.join(data_dir, 'pass-2')
    os.makedirs(output_dir)
    for name, content in (('txs.bin.zst', b'database'), ('txs.bin.zst.report', b'report\n')):
        path = os.path.join(output_dir, name)
        with open(path, 'wb') as f:
            f.write(content)
        write_checksum_file(path)
    return output_dir


def test_missing_environment_exits_with_error(tmp_path):
    result = run_script(DATA_DIR=str(tmp_path))
    assert result.returncode == 1
    assert 'GENOME_RELEASE, CDOT_FILENAME' in result.stderr
    assert 'Traceback' not in result.stderr
    assert not os.path.exists(os.path.join(str(tmp_path), 'pass-2'))


def test_check_valid_checksums(tmp_path):
    write_previous_run(str(tmp_path))
    result = run_script('--check', DATA_DIR=str(tmp_path), GENOME_RELEASE='grch37', CDOT_FILENAME='cdot.json.gz')
    assert result.returncode == 0


def test_check_modified_report_exits_with_error(tmp_path):
    output_dir = write_previous_run(str(tmp_path))
    with open(os.path.join(output_dir, 'txs.bin.zst.report'), 'ab') as f:
        f.write(b'extra line\n')
    result = run_script('--check', DATA_DIR=str(tmp_path), GENOME_RELEASE='grch37', CDOT_FILENAME='cdot.json.gz')
    assert result.returncode == 1
    assert 'Checksum mismatch' in result.stderr


def test_check_malformed_checksum_exits_with_error(tmp_path):
    output_dir = write_previous_run(str(tmp_path))
    with open(os.path.join(output_dir, 'txs.bin.zst.sha256'), 'w') as f:
        f.write('')
    result = run_script('--check', DATA_DIR=str(tmp_path), GENOME_RELEASE='grch37', CDOT_FILENAME='cdot.json.gz')
    assert result.returncode == 1
    assert 'Traceback' not in result.stderr
