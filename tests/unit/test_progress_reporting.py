"""
Tests for progress sinks.
"""

import logging

from catalog_datagen.generators.progress import ProgressReporter, TqdmProgress


class TestProgressReporter:
    def test_reports_every_ten_percent(self, caplog):
        reporter = ProgressReporter(100, "Tags")

        with caplog.at_level(logging.INFO, logger="catalog_datagen.generators.progress"):
            for _ in range(100):
                reporter(1)

        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 10
        assert messages[0].startswith("Tags: 10/100")
        assert messages[-1] == "Tags: 100/100 (100.0%)"

    def test_large_increment_reports_once(self, caplog):
        reporter = ProgressReporter(1000, "Products")

        with caplog.at_level(logging.INFO, logger="catalog_datagen.generators.progress"):
            reporter.update(450)

        assert len(caplog.records) == 1
        assert reporter.last_reported_percent == 40

    def test_zero_total_is_silent(self, caplog):
        reporter = ProgressReporter(0, "Nothing")
        with caplog.at_level(logging.INFO, logger="catalog_datagen.generators.progress"):
            reporter(5)
        assert caplog.records == []

    def test_complete(self):
        reporter = ProgressReporter(10)
        reporter.complete()
        assert reporter.processed_items == 10


class TestTqdmProgress:
    def test_advances_bar(self):
        progress = TqdmProgress(10, "Downloads")
        progress(4)
        progress(6)
        assert progress.bar.n == 10
        progress.close()
