"""Coordinates the base and button-press animations, brightness and hotkeys."""

from __future__ import annotations

import time
from collections.abc import Iterable, Mapping
from dataclasses import fields

from .animation import (
    FRAME_SIZE,
    TOTAL_EFFECTS,
    Animation,
    AnimationEffect,
    AnimationHotkey,
    AnimationOptions,
)
from .color import BLACK, RGB, LEDFormat
from .effects import Chase, Clock, Rainbow, StaticColor, StaticTheme, Theme
from .pixel import Pixel, PixelMatrix

HOTKEY_DELAY = 0.25


class AnimationStation:
    """Runs the selected base animation plus a button-press overlay into a frame."""

    def __init__(
        self,
        matrix: PixelMatrix | None = None,
        led_format: LEDFormat = LEDFormat.GRB,
        clock: Clock = time.monotonic,
    ) -> None:
        self.matrix = matrix if matrix is not None else PixelMatrix()
        self.led_format = LEDFormat(led_format)
        self._clock = clock
        self.options = AnimationOptions()
        self.themes: list[Theme] = []
        self.base_animation: Animation | None = None
        self.button_animation: StaticColor | None = None
        self.last_pressed: list[Pixel] = []
        self.frame: list[RGB] = [BLACK] * FRAME_SIZE
        self.next_change = 0.0
        self.brightness_max = 100
        self.brightness_steps = 5
        self.brightness_x = 0.0
        self.set_brightness(1)

    @property
    def mode(self) -> int:
        """Index of the current base animation."""
        return self.options.base_animation_index

    @property
    def brightness(self) -> int:
        """Current brightness level."""
        return self.options.brightness

    def _step_size(self) -> int:
        return self.brightness_max // self.brightness_steps

    def configure_brightness(self, maximum: int, steps: int) -> None:
        """Set the maximum brightness and the number of steps to it."""
        if steps <= 0:
            raise ValueError(f"brightness steps must be positive: {steps}")
        self.brightness_max = maximum
        self.brightness_steps = steps

    def handle_event(self, action: AnimationHotkey) -> None:
        """Carry out a hotkey action, at most once per quarter second."""
        action = AnimationHotkey(action)
        if action is AnimationHotkey.NONE or self._clock() < self.next_change:
            return

        if action is AnimationHotkey.BRIGHTNESS_UP:
            self.increase_brightness()
        elif action is AnimationHotkey.BRIGHTNESS_DOWN:
            self.decrease_brightness()
        elif action is AnimationHotkey.ANIMATION_UP:
            self.change_animation(1)
        elif action is AnimationHotkey.ANIMATION_DOWN:
            self.change_animation(-1)
        elif action is AnimationHotkey.PARAMETER_UP:
            if self.base_animation is not None:
                self.base_animation.parameter_up()
        elif action is AnimationHotkey.PARAMETER_DOWN:
            if self.base_animation is not None:
                self.base_animation.parameter_down()
        elif action is AnimationHotkey.PRESS_PARAMETER_UP:
            if self.button_animation is not None:
                self.button_animation.parameter_up()
        elif action is AnimationHotkey.PRESS_PARAMETER_DOWN:
            if self.button_animation is not None:
                self.button_animation.parameter_down()

        self.next_change = self._clock() + HOTKEY_DELAY

    def change_animation(self, change_size: int) -> None:
        """Move the base animation forwards or backwards."""
        self.set_mode(self.adjust_index(change_size))

    def adjust_index(self, change_size: int) -> int:
        """Return the animation index ``change_size`` steps away; out of range gives 0."""
        new_index = (self.options.base_animation_index + change_size) & 0xFFFF
        if new_index >= TOTAL_EFFECTS:
            return 0
        return new_index

    def handle_pressed(self, pressed: Iterable[Pixel]) -> None:
        """Light the pressed pixels with the button colour."""
        pressed = list(pressed)
        if pressed != self.last_pressed:
            self.last_pressed = pressed
            if self.button_animation is None:
                self.button_animation = StaticColor(self.matrix, self.options, pressed)
            self.button_animation.update_pixels(pressed)

    def clear_pressed(self) -> None:
        """Forget all pressed pixels."""
        if self.button_animation is not None:
            self.button_animation.clear_pixels()
        self.last_pressed.clear()

    def animate(self) -> None:
        """Draw the next frame."""
        if self.base_animation is None:
            self.clear()
            return
        self.base_animation.animate(self.frame)
        if self.button_animation is not None:
            self.button_animation.animate(self.frame)

    def clear(self) -> None:
        """Set every LED in the frame to black."""
        self.frame[:] = [BLACK] * FRAME_SIZE

    def set_mode(self, mode: int) -> None:
        """Switch the base animation; unknown indexes give a static colour."""
        self.options.base_animation_index = mode & 0xFF
        try:
            effect = AnimationEffect(self.options.base_animation_index)
        except ValueError:
            effect = AnimationEffect.STATIC_COLOR

        if effect is AnimationEffect.RAINBOW:
            self.base_animation = Rainbow(self.matrix, self.options, self._clock)
        elif effect is AnimationEffect.CHASE:
            self.base_animation = Chase(self.matrix, self.options, self._clock)
        elif effect is AnimationEffect.STATIC_THEME:
            self.base_animation = StaticTheme(self.matrix, self.options, self.themes)
        else:
            self.base_animation = StaticColor(self.matrix, self.options)

    def set_matrix(self, matrix: PixelMatrix) -> None:
        """Replace the layout; running animations see the new one."""
        self.matrix.setup(matrix.pixels, matrix.leds_per_pixel)

    def set_options(self, options: AnimationOptions) -> None:
        """Copy ``options`` into the settings shared with the animations."""
        for item in fields(options):
            setattr(self.options, item.name, getattr(options, item.name))
        self.set_brightness(options.brightness)

    def apply_brightness(self) -> list[int]:
        """Return the frame as packed LED words scaled by the brightness."""
        return [color.value(self.led_format, self.brightness_x) for color in self.frame]

    def set_brightness(self, brightness: int) -> None:
        """Recompute the brightness scale; a level above the step count clamps the stored level."""
        if brightness > self.brightness_steps:
            self.options.brightness = self.brightness_steps
        scale = self.options.brightness * self._step_size() / 255.0
        self.brightness_x = min(max(scale, 0.0), 1.0)

    def decrease_brightness(self) -> None:
        """Lower the brightness one level, not below zero."""
        if self.options.brightness > 0:
            self.options.brightness -= 1
            self.set_brightness(self.options.brightness)

    def increase_brightness(self) -> None:
        """Raise the brightness one level, not above the step count."""
        step_size = self._step_size()
        if self.options.brightness < step_size:
            self.options.brightness += 1
            self.set_brightness(self.options.brightness)
        elif self.options.brightness > step_size:
            self.set_brightness(self.brightness_steps)

    def add_theme(self, theme: Mapping[int, RGB]) -> None:
        """Append a theme mapping button masks to colours."""
        self.themes.append(dict(theme))

    def clear_themes(self) -> None:
        """Remove all themes."""
        self.themes.clear()