"""
命令模式示範：以命令對象控制音響系統。
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from rich.console import Console

logger = logging.getLogger(__name__)


class AudioReceiver:
    """命令的接收者。"""

    def __init__(self):
        self.audio_system_is_turned_on = False
        self.music_is_playing = False


class AudioCommand(ABC):
    """所有音響命令的基類。"""

    def __init__(self, receiver: AudioReceiver):
        self.receiver = receiver

    @abstractmethod
    def execute(self) -> str:
        """執行命令並返回狀態描述。"""


class TurnOnCommand(AudioCommand):
    def execute(self) -> str:
        if self.receiver.audio_system_is_turned_on:
            return "Audio system is already on"
        self.receiver.audio_system_is_turned_on = True
        return "Got command... Audio System is turned on"


class TurnOffCommand(AudioCommand):
    def execute(self) -> str:
        if not self.receiver.audio_system_is_turned_on:
            return "Audio system is already off"
        messages = []
        if self.receiver.music_is_playing:
            messages.append("Music is turning off..")
            self.receiver.music_is_playing = False
        self.receiver.audio_system_is_turned_on = False
        messages.append("Got command... Audio System is turned off")
        return "\n".join(messages)


class PlayMusicCommand(AudioCommand):
    def execute(self) -> str:
        if not self.receiver.audio_system_is_turned_on:
            return "Audio system is turned off, music cannot be played"
        self.receiver.music_is_playing = True
        return "Got command... Audio System is playing music"


class StopMusicCommand(AudioCommand):
    def execute(self) -> str:
        if not self.receiver.audio_system_is_turned_on:
            return "Audio system is turned off, music cannot be stopped"
        if not self.receiver.music_is_playing:
            return "Audio system is not playing music"
        self.receiver.music_is_playing = False
        return "Got command... Audio System is not playing music now"


class Invoker:
    """保存命令列表並按順序執行。"""

    def __init__(self, receiver: AudioReceiver, commands: Optional[List[AudioCommand]] = None):
        self.receiver = receiver
        self.commands: List[AudioCommand] = list(commands or [])

    def add_command(self, command: AudioCommand) -> None:
        self.commands.append(command)

    def remove_command_at(self, index: int) -> bool:
        """移除指定位置的命令，索引無效時返回 False。"""
        if not 0 <= index < len(self.commands):
            return False
        del self.commands[index]
        return True

    def perform_commands(self) -> List[str]:
        results = []
        for command in self.commands:
            result = command.execute()
            logger.debug(f"{type(command).__name__}: {result}")
            results.append(result)
        return results


def run_demo(console: Console) -> None:
    audio_system = AudioReceiver()
    invoker = Invoker(audio_system)
    invoker.add_command(TurnOnCommand(audio_system))
    invoker.add_command(PlayMusicCommand(audio_system))
    invoker.add_command(StopMusicCommand(audio_system))
    invoker.add_command(PlayMusicCommand(audio_system))
    invoker.add_command(TurnOffCommand(audio_system))

    for result in invoker.perform_commands():
        console.print(result)
