from src.utils.file_size import format_file_size


class TestFormatFileSize:
    def test_zero(self) -> None:
        assert format_file_size(0) == "0 B"

    def test_invalid_input(self) -> None:
        assert format_file_size(-5) == "0 B"
        assert format_file_size(float("nan")) == "0 B"
        assert format_file_size("1024") == "0 B"
        assert format_file_size(None) == "0 B"
        assert format_file_size(float("inf")) == "0 B"

    def test_bytes(self) -> None:
        assert format_file_size(512) == "512 B"
        assert format_file_size(1023) == "1023 B"

    def test_single_decimal_below_ten(self) -> None:
        assert format_file_size(1024) == "1.0 KB"
        assert format_file_size(1536) == "1.5 KB"

    def test_no_decimals_from_ten(self) -> None:
        assert format_file_size(10 * 1024) == "10 KB"
        assert format_file_size(10752) == "11 KB"

    def test_larger_units(self) -> None:
        assert format_file_size(5 * 1024 * 1024) == "5.0 MB"
        assert format_file_size(3 * 1024**3) == "3.0 GB"
        assert format_file_size(2048 * 1024**4) == "2048 TB"
