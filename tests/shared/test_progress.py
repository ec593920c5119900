"""Tests for shared.progress module."""

import io
import logging

import pytest

from shared.progress import FrameProgress, FrameStats, StatusLine, format_eta


def _progress(total: int) -> tuple[FrameProgress, io.StringIO]:
    stream = io.StringIO()
    return FrameProgress(total, status=StatusLine(stream)), stream


class TestFormatEta:
    """Tests for format_eta function."""

    @pytest.mark.parametrize(
        ('seconds', 'expected'),
        [(float('inf'), '--:--'), (0, '00:00'), (75, '01:15'), (3725, '01:02:05')],
    )
    def test_format(self, seconds, expected):
        assert format_eta(seconds) == expected


class TestStatusLine:
    """Tests for StatusLine class."""

    def test_redraw_pads_shorter_message(self):
        stream = io.StringIO()
        status = StatusLine(stream)
        status.show('abcdef')
        status.show('xy')
        assert stream.getvalue() == '\rabcdef\rxy    '

    def test_clear_blanks_line(self):
        stream = io.StringIO()
        status = StatusLine(stream)
        status.show('abc')
        status.clear()
        assert stream.getvalue().endswith('\r   \r')

    def test_clear_without_output_writes_nothing(self):
        stream = io.StringIO()
        StatusLine(stream).clear()
        assert stream.getvalue() == ''

    def test_plain_mode_appends_newlines(self):
        stream = io.StringIO()
        status = StatusLine(stream, redraw=False)
        status.show('a')
        status.show('b')
        assert stream.getvalue() == 'a\nb\n'


class TestFrameStats:
    """Tests for FrameStats dataclass."""

    def test_mean_of_no_frames_is_zero(self):
        assert FrameStats().mean_segments == 0.0

    def test_mean(self):
        assert FrameStats(frames=4, segments=10).mean_segments == 2.5


class TestFrameProgress:
    """Tests for FrameProgress class."""

    def test_counts_frames_and_segments(self):
        progress, _ = _progress(3)
        progress.frame_done(0, 12)
        progress.frame_done(1, 0)
        progress.frame_done(2, 8)
        stats = progress.stats
        assert stats.frames == 3
        assert stats.segments == 20
        assert stats.last_segments == 8
        assert stats.empty_frames == 1

    def test_line_shows_frame_and_segments(self):
        progress, stream = _progress(4)
        progress.frame_done(1, 57)
        assert 'Кадр 2/4' in stream.getvalue()
        assert 'отрезков: 57' in stream.getvalue()

    def test_full_bar_when_done(self):
        progress, _ = _progress(2)
        progress.frame_done(0, 1)
        progress.frame_done(1, 1)
        assert '░' not in progress.render_line()

    def test_total_at_least_one(self):
        progress, _ = _progress(0)
        assert progress.total == 1

    def test_summary(self):
        progress, _ = _progress(2)
        progress.frame_done(0, 3)
        progress.frame_done(1, 5)
        assert progress.summary() == (
            'Отрисовано кадров: 2, отрезков: 8 (в среднем 4.0 на кадр), '
            'пустых кадров: 0'
        )

    def test_close_warns_about_empty_frames(self, caplog):
        progress, stream = _progress(2)
        progress.frame_done(0, 0)
        progress.frame_done(1, 4)
        with caplog.at_level(logging.WARNING, logger='shared.progress'):
            progress.close()
        assert 'Isoline missing in 1 of 2 frames' in caplog.text
        assert stream.getvalue().endswith('\r')

    def test_close_silent_when_every_frame_has_isoline(self, caplog):
        progress, _ = _progress(1)
        progress.frame_done(0, 2)
        with caplog.at_level(logging.WARNING, logger='shared.progress'):
            progress.close()
        assert caplog.text == ''
