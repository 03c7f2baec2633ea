import importlib

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QTimer

from ..audio import AudioUnavailable, CuePlayer, synthesize_tone
from ..config import SAMPLE_RATE

RELEASE_GRACE_MS = 500


def load_multimedia():
    """
    QtMultimedia, imported on first use: it links against the native
    audio stack, which may be missing on the host
    """
    try:
        return importlib.import_module("PySide6.QtMultimedia")
    except ImportError as e:
        raise AudioUnavailable(f"QtMultimedia not loadable: {e}") from e


class QtTonePlayer(CuePlayer):
    """
    plays synthesized cue tones through QtMultimedia
    """
    def __init__(self, muted=False, parent=None):
        super().__init__(muted=muted)
        self.parent = parent
        self._playing = []      # (sink, buffer) kept alive until idle
        self._mm = None

    def _emit(self, cue):
        if self._mm is None:
            self._mm = load_multimedia()
        mm = self._mm
        try:
            device = mm.QMediaDevices.defaultAudioOutput()
        except Exception as e:   # backend plugin missing
            raise AudioUnavailable(str(e)) from e
        if device.isNull():
            raise AudioUnavailable("no audio output device")

        fmt = mm.QAudioFormat()
        fmt.setSampleRate(SAMPLE_RATE)
        fmt.setChannelCount(1)
        fmt.setSampleFormat(mm.QAudioFormat.Int16)
        if not device.isFormatSupported(fmt):
            raise AudioUnavailable("output device rejects 16-bit mono")

        samples = synthesize_tone(cue.frequency, cue.duration_ms)
        buffer = QBuffer(self.parent)
        buffer.setData(QByteArray(samples.tobytes()))
        buffer.open(QIODevice.ReadOnly)

        sink = mm.QAudioSink(device, fmt, self.parent)
        entry = (sink, buffer)
        sink.stateChanged.connect(lambda state: self._on_state(entry, state))
        self._playing.append(entry)
        sink.start(buffer)
        if sink.error() != mm.QAudio.NoError:
            self._release(entry)
            raise AudioUnavailable(f"audio sink error {sink.error()}")
        # some backends never report idle
        QTimer.singleShot(cue.duration_ms + RELEASE_GRACE_MS, lambda: self._release(entry))

    def _on_state(self, entry, state):
        # idle = buffer drained
        if state in (self._mm.QAudio.IdleState, self._mm.QAudio.StoppedState):
            self._release(entry)

    def _release(self, entry):
        if entry not in self._playing:
            return
        self._playing.remove(entry)
        sink, buffer = entry
        sink.stop()
        buffer.close()
        sink.deleteLater(); buffer.deleteLater()
