"""
狀態模式示範：音響系統的行為隨狀態對象改變。
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum

from rich.console import Console


class Song(Enum):
    GODZILLA = "godzilla"
    MADE_BY_AMERICA = "madeByAmerica"
    PRAY_FOR_ME = "prayForMe"
    NONE = "none"


class AudioSystemState(ABC):
    @abstractmethod
    def is_playing(self, audio_system: "AudioSystem") -> bool:
        pass

    @abstractmethod
    def song_name(self, audio_system: "AudioSystem") -> Song:
        pass


class TurnedOffState(AudioSystemState):
    def is_playing(self, audio_system: "AudioSystem") -> bool:
        return False

    def song_name(self, audio_system: "AudioSystem") -> Song:
        return Song.NONE


class TurnedOnState(AudioSystemState):
    def is_playing(self, audio_system: "AudioSystem") -> bool:
        return False

    def song_name(self, audio_system: "AudioSystem") -> Song:
        return Song.NONE


class PlayingState(AudioSystemState):
    def __init__(self, song: Song):
        self.song = song

    def is_playing(self, audio_system: "AudioSystem") -> bool:
        return self.song is not Song.NONE

    def song_name(self, audio_system: "AudioSystem") -> Song:
        return self.song


class AudioSystem:
    """把查詢委託給當前狀態對象的音響系統。"""

    def __init__(self):
        self._state: AudioSystemState = TurnedOffState()
        self._is_turned_on = False
        self.logger = logging.getLogger(__name__)

    @property
    def state(self) -> AudioSystemState:
        return self._state

    @property
    def is_turned_on(self) -> bool:
        return self._is_turned_on

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing(self)

    @property
    def song_name(self) -> Song:
        return self._state.song_name(self)

    def turn_off(self) -> None:
        self._is_turned_on = False
        self._state = TurnedOffState()

    def turn_on(self) -> None:
        self._is_turned_on = True
        self._state = TurnedOnState()

    def play_music(self, song: Song) -> bool:
        """
        播放歌曲。

        Returns:
            音響關閉時返回 False，狀態不變
        """
        if not self._is_turned_on:
            self.logger.warning("Cannot play music because AudioSystem is turned off.")
            return False
        self._state = PlayingState(song)
        return True

    def __str__(self) -> str:
        return (
            f"Turned on: {self._is_turned_on}, is song playing {self.is_playing}, "
            f"song name is {self.song_name.value}\n"
        )


def run_demo(console: Console) -> None:
    audio_system = AudioSystem()
    console.print(str(audio_system))
    audio_system.turn_on()
    console.print(str(audio_system))
    audio_system.play_music(Song.GODZILLA)
    console.print(str(audio_system))
    audio_system.turn_off()
    console.print(str(audio_system))
    if not audio_system.play_music(Song.MADE_BY_AMERICA):
        console.print("Cannot play music because AudioSystem is turned off.")
