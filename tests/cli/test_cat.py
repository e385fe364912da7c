"""End-to-end tests for the linecat command."""

import base64


def test_plain_copy_from_file(invoke, sample_file, sample_text):
    res = invoke([str(sample_file)])
    assert res.exit_code == 0
    assert res.stdout == sample_text


def test_plain_copy_keeps_missing_final_newline(invoke, tmp_path):
    path = tmp_path / "partial.txt"
    path.write_bytes(b"a\nb")
    res = invoke([str(path)])
    assert res.stdout == "a\nb"


def test_plain_copy_from_stdin(invoke, sample_text):
    res = invoke([], input_data=sample_text)
    assert res.exit_code == 0
    assert res.stdout == sample_text


def test_line_numbering(invoke, sample_file):
    res = invoke(["-n", str(sample_file)])
    assert res.exit_code == 0
    assert res.stdout == "1 Line 1\n2 Line 2\n3 Line 3\n"


def test_line_numbering_stdin(invoke, sample_text):
    res = invoke(["-n"], input_data=sample_text)
    assert res.stdout == "1 Line 1\n2 Line 2\n3 Line 3\n"


def test_numbering_continues_across_files(invoke, sample_file, tmp_path):
    other = tmp_path / "other.txt"
    other.write_text("Line 4\n")
    res = invoke(["-n", str(sample_file), str(other)])
    assert res.stdout == "1 Line 1\n2 Line 2\n3 Line 3\n4 Line 4\n"


def test_dollar_sign(invoke, sample_file):
    res = invoke(["-d", str(sample_file)])
    assert res.stdout == "Line 1$\nLine 2$\nLine 3$\n"


def test_replace_tabs(invoke):
    res = invoke(["-t"], input_data="Line 1\tLine 2\tLine 3\n")
    assert res.stdout == "Line 1^ILine 2^ILine 3\n"


def test_compress_empty_lines(invoke, blank_runs_file):
    res = invoke(["-s", str(blank_runs_file)])
    assert res.exit_code == 0
    assert res.stdout == "Line 1\n\nLine 2\n\nLine 3\n"


def test_search_text(invoke, sample_file):
    res = invoke(["--search", "--text", "Line 2", str(sample_file)])
    assert res.exit_code == 0
    assert res.stdout == "Line 2\n"


def test_case_insensitive_search(invoke, sample_text):
    res = invoke(["--search", "--text", "line 2", "-i"], input_data=sample_text)
    assert res.stdout == "Line 2\n"


def test_regex_search(invoke, sample_text):
    res = invoke(["--search", "--text", "reg:[13]$"], input_data=sample_text)
    assert res.stdout == "Line 1\nLine 3\n"


def test_search_with_numbering_counts_matches(invoke, sample_text):
    res = invoke(["-n", "--search", "--text", "reg:[23]"], input_data=sample_text)
    assert res.stdout == "1 Line 2\n2 Line 3\n"


def test_all_decorations_together(invoke):
    res = invoke(["-n", "-d", "-t", "-s"], input_data="a\tb\n\n\n\nc\n")
    assert res.stdout == "1 a^Ib$\n2 $\n3 c$\n"


def test_base64_encoding(invoke, sample_file):
    res = invoke(["--encode-base64", str(sample_file)])
    assert res.exit_code == 0
    assert res.stdout == "TGluZSAx\nTGluZSAy\nTGluZSAz\n"


def test_base64_decoding(invoke, sample_text):
    res = invoke(["--decode-base64"], input_data="TGluZSAx\nTGluZSAy\nTGluZSAz\n")
    assert res.exit_code == 0
    assert res.stdout == sample_text


def test_base64_round_trip(invoke):
    text = "tabs\tand ünïcödé\n\nlast\n"
    encoded = invoke(["--encode-base64"], input_data=text).stdout
    assert invoke(["--decode-base64"], input_data=encoded).stdout == text


def test_encoding_ignores_other_features(invoke, sample_text):
    res = invoke(["--encode-base64", "-n"], input_data=sample_text)
    assert res.exit_code == 0
    assert res.stdout == "TGluZSAx\nTGluZSAy\nTGluZSAz\n"
    assert "Ignoring number" in res.output


def test_malformed_decode_aborts_after_flushing(invoke):
    good = base64.b64encode(b"ok").decode()
    res = invoke(["--decode-base64"], input_data=f"{good}\nnot base64!\n{good}\n")
    assert res.exit_code == 4
    assert res.stdout == "ok\n"
    assert "Error: line 2: invalid base64" in res.output


def test_malformed_regex_writes_nothing(invoke, sample_file):
    res = invoke(["--search", "--text", "reg:(", str(sample_file)])
    assert res.exit_code == 3
    assert res.stdout == ""
    assert "Error: invalid regular expression" in res.output


def test_encode_and_decode_conflict(invoke, sample_file):
    res = invoke(["--encode-base64", "--decode-base64", str(sample_file)])
    assert res.exit_code == 2
    assert res.stdout == ""
    assert "cannot be used together" in res.output


def test_search_with_encoding_conflict(invoke, sample_file):
    res = invoke(["--encode-base64", "--search", "--text", "x", str(sample_file)])
    assert res.exit_code == 2
    assert res.stdout == ""


def test_search_requires_text(invoke, sample_file):
    res = invoke(["--search", str(sample_file)])
    assert res.exit_code == 2
    assert "--search requires --text" in res.output


def test_text_requires_search(invoke, sample_file):
    res = invoke(["--text", "x", str(sample_file)])
    assert res.exit_code == 2


def test_missing_file(invoke, tmp_path):
    res = invoke([str(tmp_path / "nonexistent.txt")])
    assert res.exit_code == 1
    assert "Error:" in res.output
    assert "nonexistent.txt" in res.output


def test_missing_file_mid_list_keeps_earlier_output(invoke, sample_file, tmp_path):
    later = tmp_path / "later.txt"
    later.write_text("never shown\n")
    res = invoke(["-n", str(sample_file), str(tmp_path / "gone.txt"), str(later)])
    assert res.exit_code == 1
    assert res.stdout == "1 Line 1\n2 Line 2\n3 Line 3\n"
    assert "gone.txt" in res.output


def test_pages_without_terminal_prints_everything(invoke, sample_file, sample_text):
    res = invoke(["--pages", str(sample_file)])
    assert res.exit_code == 0
    assert res.stdout == sample_text


def test_defaults_file_enables_features(invoke, isolated_config_dir, sample_file):
    (isolated_config_dir / "linecat.toml").write_text(
        "number_feature = true\ndollar_sign_feature = true\n"
    )
    res = invoke([str(sample_file)])
    assert res.stdout == "1 Line 1$\n2 Line 2$\n3 Line 3$\n"


def test_config_dir_option(invoke, tmp_path, sample_file):
    config_dir = tmp_path / "custom"
    config_dir.mkdir()
    (config_dir / "linecat.toml").write_text("tabs_feature = true\nnumber_feature = true\n")
    res = invoke(["--config-dir", str(config_dir), str(sample_file)])
    assert res.stdout == "1 Line 1\n2 Line 2\n3 Line 3\n"


def test_no_config_ignores_defaults_file(invoke, isolated_config_dir, sample_file, sample_text):
    (isolated_config_dir / "linecat.toml").write_text("number_feature = true\n")
    res = invoke(["--no-config", str(sample_file)])
    assert res.stdout == sample_text


def test_broken_defaults_file_warns(invoke, isolated_config_dir, sample_file, sample_text):
    (isolated_config_dir / "linecat.toml").write_text("not toml [\n")
    res = invoke([str(sample_file)])
    assert res.exit_code == 0
    assert res.stdout == sample_text
    assert "Invalid TOML" in res.output


def test_verbose_logs_pipeline(invoke, sample_file):
    res = invoke(["-v", "-n", str(sample_file)])
    assert res.exit_code == 0
    assert "Pipeline(LineNumber())" in res.output
    assert res.stdout == "1 Line 1\n2 Line 2\n3 Line 3\n"


def test_help(invoke):
    res = invoke(["--help"])
    assert res.exit_code == 0
    assert "--encode-base64" in res.output
    assert "--search" in res.output


def test_version(invoke):
    res = invoke(["--version"])
    assert res.exit_code == 0
    assert "linecat, version 0.4.5" in res.output
