from __future__ import annotations

from pathlib import Path

import pytest

from scripthost.services.shebang import is_marker_line, sniff_shebang


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "script.py"
    path.write_text(text)
    return path


def test_marker_detection() -> None:
    assert is_marker_line("#!/usr/bin/env scripthost script\n")
    assert not is_marker_line("#!/usr/bin/env python\n")
    assert not is_marker_line("# scripthost\n")


def test_plain_file_is_not_sniffed(tmp_path: Path) -> None:
    path = _write(tmp_path, "#!/usr/bin/env python\nprint('hi')\n")

    assert sniff_shebang(path) is None


def test_code_start_token_ends_header(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "#!/usr/bin/env scripthost script\n# %%\nvalue = 1\nvalue + 1\n",
    )

    header = sniff_shebang(path)

    assert header is not None
    assert header.marker == "#!/usr/bin/env scripthost script"
    assert header.first_body_line is None
    assert header.body == b"value = 1\nvalue + 1\n"
    assert header.source == b"value = 1\nvalue + 1\n"
    assert header.body_line_offset == 2


def test_blank_lines_before_token_are_skipped(tmp_path: Path) -> None:
    path = _write(tmp_path, "#!scripthost\n\n   \n  # %%  \nx = 3\n")

    header = sniff_shebang(path)

    assert header is not None
    assert header.source == b"x = 3\n"
    assert header.body_line_offset == 4


def test_first_content_line_is_kept(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "#!/usr/bin/env scripthost script\n\nname = 'job'\nname.upper()\n",
    )

    header = sniff_shebang(path)

    assert header is not None
    assert header.first_body_line == b"name = 'job'\n"
    assert header.body == b"name.upper()\n"
    assert header.source == b"name = 'job'\nname.upper()\n"
    assert header.body_line_offset == 2


def test_marker_only_file_has_empty_body(tmp_path: Path) -> None:
    path = _write(tmp_path, "#!/usr/bin/env scripthost script\n")

    header = sniff_shebang(path)

    assert header is not None
    assert header.source == b""


def test_unreadable_path_propagates(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        sniff_shebang(tmp_path / "missing.py")


def test_first_content_line_keeps_raw_bytes(tmp_path: Path) -> None:
    path = tmp_path / "latin.py"
    path.write_bytes(b"#!/usr/bin/env scripthost script\ns = b'caf\xe9'\ns\n")

    header = sniff_shebang(path)

    assert header is not None
    assert header.first_body_line == b"s = b'caf\xe9'\n"
    assert header.source == b"s = b'caf\xe9'\ns\n"


def test_first_content_line_keeps_crlf(tmp_path: Path) -> None:
    path = tmp_path / "dos.py"
    path.write_bytes(b"#!scripthost\r\n\r\nx = 1\r\nx\r\n")

    header = sniff_shebang(path)

    assert header is not None
    assert header.marker == "#!scripthost"
    assert header.source == b"x = 1\r\nx\r\n"
