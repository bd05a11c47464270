"""
Tests unitaires pour configure_logging et le niveau de la console.
"""

import sys

import pytest
from loguru import logger

from src.logging_config import configure_logging, level_for_verbosity, set_console_level


@pytest.fixture
def restore_logger():
    """Retablit le handler loguru par defaut apres le test."""
    yield
    # remove() vide la file des handlers enqueue
    logger.remove()
    logger.add(sys.stderr)


class TestLevelForVerbosity:
    """Tests pour level_for_verbosity."""

    @pytest.mark.parametrize(
        "verbose,quiet,expected",
        [
            (0, False, "WARNING"),
            (1, False, "INFO"),
            (2, False, "DEBUG"),
            (5, False, "DEBUG"),
            (0, True, "ERROR"),
            (2, True, "ERROR"),
        ],
    )
    def test_mapping(self, verbose, quiet, expected) -> None:
        assert level_for_verbosity(verbose, quiet, default="WARNING") == expected


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_writes_json_log_file(self, tmp_path, restore_logger) -> None:
        """Les messages sont ecrits dans le fichier, repertoire cree au besoin."""
        log_file = tmp_path / "logs" / "cinequery.log"
        configure_logging(log_level="WARNING", log_file=log_file)
        logger.warning("test message")
        logger.remove()

        assert log_file.exists()
        content = log_file.read_text()
        assert "test message" in content
        assert '"level"' in content

    def test_console_level_can_be_raised_and_lowered(
        self, tmp_path, capsys, restore_logger
    ) -> None:
        """set_console_level remplace le seuil de la console sans la dupliquer."""
        configure_logging(log_level="WARNING", log_file=tmp_path / "app.log")

        set_console_level("DEBUG")
        logger.debug("detail visible")
        set_console_level("ERROR")
        logger.warning("avertissement masque")
        logger.error("erreur visible")

        err = capsys.readouterr().err
        assert err.count("detail visible") == 1
        assert "avertissement masque" not in err
        assert err.count("erreur visible") == 1

    def test_quiet_keeps_errors(self, tmp_path, capsys, restore_logger) -> None:
        """Le mode silencieux conserve les erreurs sur la console."""
        configure_logging(log_level="INFO", log_file=tmp_path / "app.log")

        set_console_level(level_for_verbosity(0, quiet=True))
        logger.info("info masquee")
        logger.error("erreur conservee")

        err = capsys.readouterr().err
        assert "info masquee" not in err
        assert "erreur conservee" in err
