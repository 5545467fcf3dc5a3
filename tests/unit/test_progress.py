from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock, patch

from cart_parser.services.progress import ProgressTracker, is_tty_enabled


def test_is_tty_enabled_returns_stdout_isatty():
    with patch("sys.stdout.isatty", return_value=True):
        assert is_tty_enabled() is True

    with patch("sys.stdout.isatty", return_value=False):
        assert is_tty_enabled() is False


class TestProgressTracker:
    """Test cases for ProgressTracker class."""

    def test_init_with_tty_enabled(self):
        with patch("cart_parser.services.progress.is_tty_enabled", return_value=True), \
             patch("cart_parser.services.progress.tqdm") as mock_tqdm:

            tracker = ProgressTracker(5, description="Test files")

            assert tracker.total_files == 5
            assert tracker.current_file == 0
            assert tracker.enabled is True
            mock_tqdm.assert_called_once_with(
                total=5,
                desc="Test files",
                unit="file",
                leave=True,
                ncols=80,
                ascii=True,
            )

    def test_init_with_tty_disabled(self):
        with patch("cart_parser.services.progress.is_tty_enabled", return_value=False), \
             patch("cart_parser.services.progress.tqdm") as mock_tqdm:
            tracker = ProgressTracker(5)

            assert tracker.enabled is False
            assert tracker.pbar is None
            mock_tqdm.assert_not_called()

    def test_start_and_finish_file_with_tty_enabled(self):
        mock_pbar = Mock()
        with patch("cart_parser.services.progress.is_tty_enabled", return_value=True), \
             patch("cart_parser.services.progress.tqdm", return_value=mock_pbar):
            tracker = ProgressTracker(2, description="Parsing carts")
            tracker.start_file(Path("/data/cart.csv"))
            tracker.finish_file(success=1, failed=0)

        assert tracker.current_file == 1
        mock_pbar.set_description.assert_any_call("Parsing carts (cart.csv)")
        mock_pbar.set_postfix.assert_called_once_with(success=1, failed=0)
        mock_pbar.update.assert_called_once_with(1)
        mock_pbar.set_description.assert_called_with("Parsing carts")

    def test_start_file_with_tty_disabled_only_counts(self):
        with patch("cart_parser.services.progress.is_tty_enabled", return_value=False):
            tracker = ProgressTracker(2)
            tracker.start_file(Path("a.csv"))
            tracker.finish_file()
        assert tracker.current_file == 1

    def test_context_manager_closes_bar(self):
        mock_pbar = Mock()
        with patch("cart_parser.services.progress.is_tty_enabled", return_value=True), \
             patch("cart_parser.services.progress.tqdm", return_value=mock_pbar):
            with ProgressTracker(1) as tracker:
                pass

        mock_pbar.close.assert_called_once()
        assert tracker.pbar is None
