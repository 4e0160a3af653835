"""Tests for AudioPlayer and VideoApp directives."""

import json

from echo_skill import ClearBehavior, EchoResponse, PlayBehavior
from echo_skill.models import LaunchDirective, PlayDirective, ResponseEnvelope, StopDirective


def directives(resp: EchoResponse) -> list:
    return json.loads(resp.to_json())["response"]["directives"]


class TestAudioPlayer:
    def test_play(self):
        resp = EchoResponse().audio_player_play(PlayBehavior.REPLACE_ALL, "https://s/1.mp3", "t1", 2500)
        assert directives(resp) == [{
            "type": "AudioPlayer.Play",
            "playBehavior": "REPLACE_ALL",
            "audioItem": {"stream": {"url": "https://s/1.mp3", "token": "t1", "offsetInMilliseconds": 2500}},
        }]

    def test_play_with_expected_previous_token(self):
        resp = EchoResponse().audio_player_play(
            "ENQUEUE", "https://s/2.mp3", "t2", expected_previous_token="t1",
        )
        stream = directives(resp)[0]["audioItem"]["stream"]
        assert stream["expectedPreviousToken"] == "t1"
        assert stream["offsetInMilliseconds"] == 0

    def test_stop(self):
        assert directives(EchoResponse().audio_player_stop()) == [{"type": "AudioPlayer.Stop"}]

    def test_clear_queue(self):
        resp = EchoResponse().audio_player_clear_queue(ClearBehavior.CLEAR_ENQUEUED)
        assert directives(resp) == [{"type": "AudioPlayer.ClearQueue", "clearBehavior": "CLEAR_ENQUEUED"}]

    def test_append_order_preserved(self):
        resp = (
            EchoResponse()
            .audio_player_play(PlayBehavior.REPLACE_ENQUEUED, "https://s/1.mp3", "t1")
            .audio_player_stop()
        )
        result = directives(resp)
        assert len(result) == 2
        assert [d["type"] for d in result] == ["AudioPlayer.Play", "AudioPlayer.Stop"]


class TestVideoApp:
    def test_launch_without_metadata(self):
        resp = EchoResponse().video_app_launch("https://v/1.mp4")
        assert directives(resp) == [{"type": "VideoApp.Launch", "videoItem": {"source": "https://v/1.mp4"}}]

    def test_launch_with_title_only_carries_both_keys(self):
        resp = EchoResponse().video_app_launch("https://v/1.mp4", title="Episode 1")
        item = directives(resp)[0]["videoItem"]
        assert item["metadata"] == {"title": "Episode 1", "subtitle": ""}


def test_directives_decode_by_type():
    raw = (
        EchoResponse()
        .audio_player_play(PlayBehavior.ENQUEUE, "https://s/1.mp3", "t1")
        .audio_player_stop()
        .video_app_launch("https://v/1.mp4", "T", "S")
        .to_json()
    )
    decoded = ResponseEnvelope.model_validate_json(raw).response.directives
    assert isinstance(decoded[0], PlayDirective)
    assert decoded[0].play_behavior == PlayBehavior.ENQUEUE
    assert isinstance(decoded[1], StopDirective)
    assert isinstance(decoded[2], LaunchDirective)
    assert decoded[2].video_item.metadata.subtitle == "S"
