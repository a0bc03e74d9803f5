"""Command line entry point tests."""

import json

import pytest

import generate_reference_vectors as cli


def run(capsys, *argv):
    code = cli.main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestCli:

    def test_default_suite_to_stdout(self, capsys, golden_vectors):
        code, out, _ = run(capsys)
        assert code == cli.EXIT_OK
        document = json.loads(out)
        assert document['vectors'] == golden_vectors

    def test_algorithm_filter_and_count(self, capsys):
        code, out, _ = run(capsys, "--algorithm", "xoshiro256++", "--count", "4")
        assert code == cli.EXIT_OK
        [vector] = json.loads(out)['vectors']
        assert vector['algorithm'] == 'xoshiro256++'
        assert vector['ints'] == ['0000000002800001', '0000000003800067',
                                  '000cc00003800067', vector['ints'][3]]

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "out" / "vectors.json"
        code, out, _ = run(capsys, "-a", "xorshift32", "-n", "1", "-o", str(target))
        assert code == cli.EXIT_OK
        assert out == ""
        vectors = json.loads(target.read_text())['vectors']
        assert vectors[0]['ints'] == ['00042021']
        assert vectors[0]['randbl32'] == ['5.00062950188294053078e-01']

    def test_list(self, capsys):
        code, out, _ = run(capsys, "--list")
        assert code == cli.EXIT_OK
        assert "xorshift128+" in out
        assert "mulberry32" in out

    def test_unknown_algorithm_exit_code(self, capsys, caplog):
        code, out, _ = run(capsys, "--algorithm", "mt19937")
        assert code == cli.EXIT_CONFIG
        assert out == ""
        assert "Unknown PRNG algorithm" in caplog.text

    def test_missing_config(self, tmp_path, capsys, caplog):
        code, _, _ = run(capsys, "--config", str(tmp_path / "missing.json"))
        assert code == cli.EXIT_NOT_FOUND
        assert "not found" in caplog.text

    def test_bad_config(self, tmp_path, capsys):
        path = tmp_path / "suite.json"
        path.write_text(json.dumps({"vectors": [{"algorithm": "xorshift32", "seed": [0]}]}))
        code, _, _ = run(capsys, "--config", str(path))
        assert code == cli.EXIT_CONFIG

    def test_sampler_mismatch_exit_code(self, capsys, caplog, monkeypatch):
        from prng_reference import SamplerMismatchError

        def diverge(*args, **kwargs):
            raise SamplerMismatchError('xorshift32', 100, 0, 0, 1)

        monkeypatch.setattr('prng_reference.assembler.cross_validate_samplers', diverge)
        code, _, _ = run(capsys, "-a", "xorshift32")
        assert code == cli.EXIT_MISMATCH
        assert "diverged" in caplog.text

    def test_negative_count_rejected_by_parser(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["--count", "-3"])

    def test_unwritable_output_exit_code(self, tmp_path, capsys, caplog):
        blocker = tmp_path / "f"
        blocker.write_text("")
        code, out, _ = run(capsys, "-a", "xorshift32", "-n", "1",
                           "-o", str(blocker / "sub" / "vectors.json"))
        assert code == cli.EXIT_IO
        assert out == ""
        assert "Cannot write output" in caplog.text

    def test_config_path_is_directory(self, tmp_path, capsys, caplog):
        code, out, _ = run(capsys, "--config", str(tmp_path))
        assert code == cli.EXIT_CONFIG
        assert out == ""
        assert "Cannot read config" in caplog.text
        assert "Cannot write output" not in caplog.text

    def test_invalid_json_config(self, tmp_path, capsys, caplog):
        path = tmp_path / "suite.json"
        path.write_text("{not json")
        code, _, _ = run(capsys, "--config", str(path))
        assert code == cli.EXIT_CONFIG
        assert "Invalid JSON" in caplog.text
