import re

import pytest

from solidkit.bin2c import Bin2CError, convert_file, define_name, main, to_c_header


def _parse_bytes(header):
    return bytes(int(h, 16) for h in re.findall(r"0x([0-9A-F]{2})", header))


def test_define_name_uppercases_and_suffixes():
    assert define_name("logo") == "LOGO_LEN"
    assert define_name("Font_8x8") == "FONT_8X8_LEN"


def test_header_for_two_bytes():
    expected = (
        "#define DATA_LEN 2\n\n"
        " static unsigned char data[]={\n  "
        "0x01,0xAB\n  "
        "};\n"
    )
    assert to_c_header(b"\x01\xab", "data") == expected


def test_header_starts_with_define_and_array():
    header = to_c_header(b"xyz", "blob")
    lines = header.splitlines()
    assert lines[0] == "#define BLOB_LEN 3"
    assert lines[2] == " static unsigned char blob[]={"
    assert header.endswith("};\n")


@pytest.mark.parametrize("size", [1, 9, 10, 11, 25, 100])
def test_bytes_round_trip_and_layout(size):
    data = bytes((i * 37) & 0xFF for i in range(size))
    header = to_c_header(data, "arr")
    assert _parse_bytes(header) == data
    data_lines = [line for line in header.splitlines() if "0x" in line]
    assert len(data_lines) == (size + 9) // 10
    assert all(line.count("0x") <= 10 for line in data_lines)
    assert header.count(",") == size - 1


def test_convert_file_writes_header(tmp_path):
    source = tmp_path / "image.bin"
    source.write_bytes(bytes(range(30)))
    written = convert_file(source, tmp_path / "image", "image")
    assert written == tmp_path / "image.h"
    text = written.read_text()
    assert text.startswith("#define IMAGE_LEN 30\n")
    assert _parse_bytes(text) == bytes(range(30))


def test_convert_file_missing_source(tmp_path):
    with pytest.raises(Bin2CError):
        convert_file(tmp_path / "absent.bin", tmp_path / "out", "x")


def test_main_usage_with_too_few_arguments(capsys):
    assert main(["only", "two"]) == 0
    assert "Usage" in capsys.readouterr().out


def test_main_reports_missing_source(tmp_path, capsys):
    status = main([str(tmp_path / "absent.bin"), str(tmp_path / "out"), "x"])
    assert status == 1
    assert "can't find source file" in capsys.readouterr().err


def test_main_converts(tmp_path):
    source = tmp_path / "d.bin"
    source.write_bytes(b"\x10\x20\x30")
    assert main([str(source), str(tmp_path / "d"), "d"]) == 0
    assert _parse_bytes((tmp_path / "d.h").read_text()) == b"\x10\x20\x30"