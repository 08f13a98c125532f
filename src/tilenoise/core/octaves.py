"""
Octave scheduling.

Drives the amplitude-decay loop: seed the buffer with noise at
amplitude ``width + height``, then repeatedly blur, halve the
amplitude and inject finer noise until the amplitude reaches zero.
Each blur smooths the detail accumulated so far and each injection
layers a smaller-scale octave on top.
"""

from typing import Callable, List

from tilenoise.core.blur import ToroidalBlur
from tilenoise.core.buffer import ColorBuffer
from tilenoise.core.noise import NoiseInjector


class OctaveScheduler:
    """Alternates blur and noise injection at a halving amplitude."""

    def __init__(
        self,
        injector: NoiseInjector | None = None,
        blur: ToroidalBlur | None = None,
    ):
        self.injector = injector or NoiseInjector()
        self.blur = blur or ToroidalBlur()

    @staticmethod
    def initial_amplitude(buffer: ColorBuffer) -> int:
        return buffer.width + buffer.height

    @staticmethod
    def amplitude_schedule(start: int) -> List[int]:
        """
        Amplitudes injected after each blur, starting from ``start``.

        ``amplitude_schedule(10)`` is ``[5, 2, 1, 0]``: one entry per
        octave, ending at zero.
        """
        levels = []
        amplitude = start
        while amplitude > 0:
            amplitude //= 2
            levels.append(amplitude)
        return levels

    def generate(
        self,
        buffer: ColorBuffer,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> List[int]:
        """
        Run the full seed + octave loop on ``buffer`` in place.

        Args:
            buffer: Buffer to fill. Existing values are added to, not replaced.
            progress_callback: Optional callback(octave_index, amplitude),
                called after each octave.

        Returns:
            The amplitude injected after each blur, in order.
        """
        amplitude = self.initial_amplitude(buffer)
        self.injector.inject(buffer, amplitude)

        levels = []
        while amplitude > 0:
            self.blur.blur(buffer)
            amplitude //= 2
            self.injector.inject(buffer, amplitude)
            levels.append(amplitude)

            if progress_callback:
                progress_callback(len(levels), amplitude)

        return levels
