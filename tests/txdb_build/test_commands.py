from txdb_build.commands import build_mehari_command, build_zstd_verify_command
from txdb_build.config import PipelineConfig


def test_build_mehari_command():
    config = PipelineConfig('/data', 'grch37', 'cdot.json.gz')
    command = build_mehari_command(config.artifact_paths(), config.genome_release, ['ACSF3', 'MC1R', 'ACSF3'])
    assert command == [
        'mehari', 'db', 'create', 'txs',
        '--path-out', '/data/pass-2/txs.bin.zst',
        '--path-seqrepo-instance', '/data/seqrepo/master',
        '--path-cdot-json', '/data/tmp/grch37/cdot.json.gz',
        '--genome-release', 'grch37',
        '--gene-symbols=ACSF3', '--gene-symbols=MC1R', '--gene-symbols=ACSF3',
    ]


def test_build_mehari_command_custom_binary():
    config = PipelineConfig('/data', 'grch38', 'cdot.json.gz')
    command = build_mehari_command(config.artifact_paths(), config.genome_release, [], mehari_bin='/opt/bin/mehari')
    assert command[0] == '/opt/bin/mehari'
    assert not [arg for arg in command if arg.startswith('--gene-symbols')]


def test_build_zstd_verify_command():
    assert build_zstd_verify_command('/data/pass-2/txs.bin.zst') == ['zstd', '-c', '-d', '/data/pass-2/txs.bin.zst']
