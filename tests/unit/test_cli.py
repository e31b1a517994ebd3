"""
Тесты для CLI sl2-word-trace

Проверяет:
1. Текстовый и JSON вывод
2. Коды выхода: 0 успех, 1 ошибка вычисления, 2 ошибка аргументов
3. Взаимоисключающие источники z и слова
"""

import json
import re

import pytest

from src.runner.cli import (
    EXIT_COMPUTATION_ERROR,
    EXIT_OK,
    EXIT_USAGE_ERROR,
    build_config,
    build_parser,
    main,
)
from src.runner.config import WordSource

# P = 100, z = 1 + 2i, слово aBabb
REFERENCE_STDOUT = (
    "(10.554325208519245131314861609014 9.3708473002148348677819571766909e-1) "
    "(8.1693283935193764694614700059867e-1 -10.555507141472143962220978984526)\n"
    "(19.683067160648062353053852999471 -20.944492858527856037779021016004) "
    "(-21.054325208519245131314861609216 -19.437084730021483486778195717869)\n"
    "trace = (-10.500000000000000000000000000202 -18.500000000000000000000000000202)\n"
)


class TestParser:
    """Тесты разбора аргументов"""

    def test_word_arguments(self) -> None:
        args = build_parser().parse_args(["-p", "100", "-z", "1", "2", "--word", "aBabb"])
        config = build_config(args)
        assert config.precision == 100
        assert config.z.as_tuple() == ("1", "2")
        assert config.word == "aBabb"
        assert not config.output_json

    def test_fraction_arguments(self) -> None:
        args = build_parser().parse_args(["-p", "64", "--random-z", "-r", "3", "2", "--seed", "4"])
        config = build_config(args)
        assert config.random_z
        assert config.word_source is WordSource.FRACTION
        assert (config.fraction.p, config.fraction.q) == (3, 2)
        assert config.seed == 4

    def test_z_sources_are_exclusive(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-p", "100", "-z", "1", "2", "--random-z", "--word", "a"])
        assert exc_info.value.code == 2

    def test_word_source_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-p", "100", "-z", "1", "2"])
        assert exc_info.value.code == 2


class TestMain:
    """Тесты main"""

    def test_text_output_matches_reference(self, capsys) -> None:
        code = main(["-p", "100", "-z", "1", "2", "--word", "aBabb"])
        captured = capsys.readouterr()

        assert code == EXIT_OK
        assert captured.out == REFERENCE_STDOUT
        assert "random seed" not in captured.err

    def test_fraction_matches_literal_word(self, capsys) -> None:
        main(["-p", "100", "-z", "1", "2", "-r", "3", "2"])
        derived = capsys.readouterr().out
        main(["-p", "100", "-z", "1", "2", "--word", "ababb"])
        assert derived == capsys.readouterr().out

    def test_drawn_seed_is_printed(self, capsys) -> None:
        code = main(["-p", "64", "--random-z", "--word", "ab"])
        err = capsys.readouterr().err

        assert code == EXIT_OK
        assert re.search(r"random seed: \d+", err)

    def test_explicit_seed_is_not_echoed(self, capsys) -> None:
        main(["-p", "64", "--random-z", "--word", "ab", "--seed", "5"])
        assert "random seed" not in capsys.readouterr().err

    def test_empty_word(self, capsys) -> None:
        code = main(["-p", "100", "-z", "1", "2", "--word", ""])
        out = capsys.readouterr().out.strip().split("\n")

        assert code == EXIT_OK
        assert out[2] == f"trace = (2.{'0' * 31} 0)"

    def test_json_output(self, capsys) -> None:
        code = main(["-p", "100", "-z", "1", "2", "-r", "3", "2", "--json"])
        report = json.loads(capsys.readouterr().out)

        assert code == EXIT_OK
        assert report["word"] == "ababb"
        assert report["source"] == "fraction"

    def test_invalid_letter_is_usage_error(self, capsys) -> None:
        code = main(["-p", "100", "-z", "1", "2", "--word", "abc"])
        assert code == EXIT_USAGE_ERROR
        assert "only the letters" in capsys.readouterr().err

    def test_invalid_fraction_is_usage_error(self, capsys) -> None:
        code = main(["-p", "100", "-z", "1", "2", "-r", "4", "2"])
        assert code == EXIT_USAGE_ERROR
        assert "lowest terms" in capsys.readouterr().err

    def test_invalid_precision_is_usage_error(self) -> None:
        assert main(["-p", "0", "-z", "1", "2", "--word", "ab"]) == EXIT_USAGE_ERROR

    def test_degenerate_z_is_computation_error(self, capsys) -> None:
        code = main(["-p", "100", "-z", "1", "0", "--word", "ab"])
        assert code == EXIT_COMPUTATION_ERROR
        assert "undefined" in capsys.readouterr().err

    def test_seeded_random_run_is_reproducible(self, capsys) -> None:
        argv = ["-p", "80", "--random-z", "--random-word", "12", "--seed", "21", "--json"]
        main(argv)
        first = json.loads(capsys.readouterr().out)
        main(argv)
        second = json.loads(capsys.readouterr().out)

        assert first == second
        assert first["word_length"] == 12
        assert first["seed"] == 21
