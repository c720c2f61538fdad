from behavioral.chain_of_responsibility import (
    Client,
    Direction,
    LAHandler,
    NYCHandler,
    Request,
    VancouverHandler,
)
from behavioral.command import (
    AudioReceiver,
    Invoker,
    PlayMusicCommand,
    StopMusicCommand,
    TurnOffCommand,
    TurnOnCommand,
)
from behavioral.state import AudioSystem, PlayingState, Song, TurnedOffState


def test_invoker_runs_commands_in_order():
    receiver = AudioReceiver()
    invoker = Invoker(receiver)
    invoker.add_command(PlayMusicCommand(receiver))
    invoker.add_command(TurnOnCommand(receiver))
    invoker.add_command(PlayMusicCommand(receiver))
    invoker.add_command(TurnOffCommand(receiver))

    results = invoker.perform_commands()

    assert results[0] == "Audio system is turned off, music cannot be played"
    assert results[2] == "Got command... Audio System is playing music"
    assert results[3].startswith("Music is turning off..")
    assert not receiver.audio_system_is_turned_on
    assert not receiver.music_is_playing


def test_stop_music_command():
    receiver = AudioReceiver()
    assert StopMusicCommand(receiver).execute() == "Audio system is turned off, music cannot be stopped"

    TurnOnCommand(receiver).execute()
    assert StopMusicCommand(receiver).execute() == "Audio system is not playing music"

    PlayMusicCommand(receiver).execute()
    StopMusicCommand(receiver).execute()
    assert not receiver.music_is_playing


def test_turn_on_twice():
    receiver = AudioReceiver()
    command = TurnOnCommand(receiver)
    command.execute()
    assert command.execute() == "Audio system is already on"


def test_remove_command_at():
    receiver = AudioReceiver()
    invoker = Invoker(receiver, [TurnOnCommand(receiver)])

    assert not invoker.remove_command_at(1)
    assert not invoker.remove_command_at(-1)
    assert invoker.remove_command_at(0)
    assert invoker.perform_commands() == []


def test_chain_approves_known_directions():
    la_handler = LAHandler()
    la_handler.set_next(NYCHandler()).set_next(VancouverHandler())
    requests = [
        Request(Direction.NYC, "Anna", 15, 0),
        Request(Direction.LA, "John", 26, 1),
        Request(Direction.VANCOUVER, "Anthony", 53, 2),
        Request(Direction.DUBAI, "Khalib", 46, 3),
    ]

    results = Client(la_handler, requests).approve_requests()

    assert [approved for _, approved in results] == [True, True, True, False]


def test_handler_without_successor_returns_none():
    assert NYCHandler().handle_request(Request(Direction.LA, "x", 1, 9)) is None


def test_set_next_returns_the_next_handler():
    first = LAHandler()
    second = NYCHandler()
    assert first.set_next(second) is second
    assert first.next_handler is second


def test_audio_system_state_transitions():
    audio_system = AudioSystem()
    assert isinstance(audio_system.state, TurnedOffState)
    assert not audio_system.play_music(Song.GODZILLA)

    audio_system.turn_on()
    assert not audio_system.is_playing
    assert audio_system.play_music(Song.GODZILLA)
    assert isinstance(audio_system.state, PlayingState)
    assert audio_system.is_playing
    assert audio_system.song_name is Song.GODZILLA

    audio_system.turn_off()
    assert audio_system.song_name is Song.NONE
    assert str(audio_system) == "Turned on: False, is song playing False, song name is none\n"


def test_playing_none_song_is_not_playing():
    audio_system = AudioSystem()
    audio_system.turn_on()
    audio_system.play_music(Song.NONE)
    assert not audio_system.is_playing
