"""
Tests for the command line entry point and the manifest writer
"""
import os
import sys

import pytest
import yaml

from teleflix.kubernetes import build


EXPECTED_FILES = [
    '00-namespace.yaml',
    '01-storage.yaml',
    '03-jellyfin.yaml',
    '04-sonarr.yaml',
    '05-radarr.yaml',
    '06-jackett.yaml',
    '07-qbittorrent.yaml',
    '99-ingress.yaml',
]


class TestWriteManifests:

    def test_writes_one_file_per_manifest(self, tmp_path, capsys):
        output_dir = tmp_path / 'out' / 'nested'
        written = build.write_manifests({'00-namespace': 'kind: Namespace\n', '99-ingress': 'kind: Ingress\n'}, str(output_dir))

        assert written == [str(output_dir / '00-namespace.yaml'), str(output_dir / '99-ingress.yaml')]
        assert (output_dir / '00-namespace.yaml').read_text() == 'kind: Namespace\n'
        assert f"Generated: {output_dir / '99-ingress.yaml'}" in capsys.readouterr().out

    def test_overwrites_previous_output(self, tmp_path):
        (tmp_path / '00-namespace.yaml').write_text('stale')
        build.write_manifests({'00-namespace': 'fresh\n'}, str(tmp_path))
        assert (tmp_path / '00-namespace.yaml').read_text() == 'fresh\n'


class TestMain:

    def test_defaults(self, tmp_path, capsys):
        output_dir = tmp_path / 'manifests'
        build.main(['--config', str(tmp_path / 'config.yaml'), '--output', str(output_dir)])

        assert sorted(os.listdir(output_dir)) == EXPECTED_FILES
        namespace = yaml.safe_load((output_dir / '00-namespace.yaml').read_text())
        assert namespace['metadata']['name'] == 'teleflix'
        assert f'kubectl apply -f {output_dir}/' in capsys.readouterr().out

    def test_flags_override_config(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('namespace: from-file\nstorageClass: from-file\n')
        output_dir = tmp_path / 'manifests'

        build.main(['-c', str(config_file), '-o', str(output_dir), '-n', 'media', '-s', 'longhorn'])

        claims = list(yaml.safe_load_all((output_dir / '01-storage.yaml').read_text()))
        assert {c['metadata']['namespace'] for c in claims} == {'media'}
        assert {c['spec']['storageClassName'] for c in claims} == {'longhorn'}

    def test_env_file(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text(
            'ingress:\n'
            '  tls:\n'
            '    enabled: true\n'
            'certManager:\n'
            '  enabled: true\n'
            '  issuer:\n'
            '    email: "{{ TELEFLIX_ACME_EMAIL }}"\n'
        )
        env_file = tmp_path / '.env'
        env_file.write_text('TELEFLIX_ACME_EMAIL=admin@example.org\n')
        output_dir = tmp_path / 'manifests'

        build.main(['-c', str(config_file), '-o', str(output_dir), '--env-file', str(env_file)])

        issuer, certificate = yaml.safe_load_all((output_dir / '02-cert-manager.yaml').read_text())
        assert issuer['spec']['acme']['email'] == 'admin@example.org'
        assert certificate['spec']['dnsNames'] == ['jellyfin.teleflix.local']


class TestRun:

    def test_error_is_reported_and_nothing_is_written(self, tmp_path, monkeypatch, capsys):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('certManager:\n  enabled: true\n  issuer:\n    type: vault\n')
        output_dir = tmp_path / 'manifests'
        monkeypatch.setattr(build, 'DEBUG', False)
        monkeypatch.setattr(sys, 'argv', ['teleflix', '-c', str(config_file), '-o', str(output_dir)])

        with pytest.raises(SystemExit) as exc_info:
            build.run()

        assert exc_info.value.code == 1
        assert "ConfigurationError: Unsupported issuer type: 'vault'" in capsys.readouterr().err
        assert not output_dir.exists()

    def test_debug_propagates_exception(self, tmp_path, monkeypatch):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('certManager:\n  enabled: true\n')
        monkeypatch.setattr(build, 'DEBUG', True)
        monkeypatch.setattr(sys, 'argv', ['teleflix', '-c', str(config_file), '-o', str(tmp_path / 'manifests')])

        with pytest.raises(ValueError, match='email'):
            build.run()

    @pytest.mark.parametrize('value, expected', [
        ('true', True),
        ('1', True),
        ('2', True),
        ('0', False),
        ('no', False),
    ])
    def test_parse_bool_env_var(self, monkeypatch, value, expected):
        from teleflix.kubernetes.utils import parse_bool_env_var
        monkeypatch.setenv('TELEFLIX_TEST_FLAG', value)
        assert parse_bool_env_var('TELEFLIX_TEST_FLAG') is expected
