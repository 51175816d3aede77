import logging
import math
import struct

import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# name -> (duration s, start Hz, end Hz, volume)
SOUND_BANK = {
    'paddle_hit': (0.06, 520, 480, 0.5),
    'wall_hit':   (0.05, 260, 240, 0.35),
    'score':      (0.3, 880, 440, 0.5),
    'match_over': (0.6, 440, 110, 0.6),
}


def synth_wave(duration, freq_start, freq_end, decay=True, volume=0.5, sample_rate=SAMPLE_RATE):
    """Raw 16-bit stereo PCM for a sine sweep from freq_start to freq_end."""
    n_samples = int(sample_rate * duration)
    buf = bytearray()
    phase = 0.0

    for i in range(n_samples):
        t = float(i) / sample_rate
        f = freq_start + (freq_end - freq_start) * (t / duration)
        # Accumulate phase so the sweep has no clicks
        phase += 2 * math.pi * f / sample_rate
        val = math.sin(phase)

        if decay:
            env = 1.0 - (t / duration)
            val *= env ** 2

        val = int(val * volume * 32767)
        buf.extend(struct.pack('<hh', val, val))

    return bytes(buf)


class SoundGenerator:
    """Procedural blips for the game events, no asset files needed."""

    def __init__(self, enabled=True):
        self.sounds = {}
        self.enabled = False
        if not enabled:
            return

        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            logger.warning("Sound disabled, mixer init failed: %s", e)
            return

        self.enabled = True
        self.generate_sounds()

    def generate_sounds(self):
        for name, (duration, f0, f1, volume) in SOUND_BANK.items():
            self.sounds[name] = pygame.mixer.Sound(buffer=synth_wave(duration, f0, f1, volume=volume))

    def play(self, name):
        if self.enabled and name in self.sounds:
            self.sounds[name].play()

    def play_events(self, events):
        # A goal that ends the match only plays the match_over sound
        if "match_over" in events:
            self.play("match_over")
            return
        for name in dict.fromkeys(events):
            self.play(name)

    def close(self):
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False
