from hexmatch.animation import Animation, AnimationState

FRAMES = ["a.png", "b.png", "c.png", "d.png"]


def make(play=True, looping=False, cooldown=0):
    return Animation(FRAMES, play, 100, looping, cooldown)


def test_initial_state_follows_play_flag():
    assert make(play=True).state is AnimationState.PLAY
    assert make(play=False).state is AnimationState.PAUSE


def test_paused_animation_does_not_advance():
    animation = make(play=False)
    animation.update(0, 1000)
    assert animation.index == 0


def test_frames_advance_after_interval():
    animation = make()
    animation.update(0, 50)
    assert animation.index == 0
    animation.update(0, 50)
    assert animation.index == 1
    assert animation.current_frame == FRAMES[1]


def test_large_delta_skips_frames():
    animation = make()
    animation.update(0, 250)
    assert animation.index == 2


def test_non_looping_ends_on_last_frame():
    animation = make()
    animation.update(0, 1000)
    assert animation.state is AnimationState.ENDED
    assert animation.index == animation.frame_count - 1
    animation.update(0, 1000)
    assert animation.index == animation.frame_count - 1


def test_looping_cools_down_then_restarts():
    animation = make(looping=True, cooldown=500)
    animation.update(1000, 1000)
    assert animation.state is AnimationState.COOLDOWN
    animation.update(1200, 0)
    assert animation.state is AnimationState.COOLDOWN
    animation.update(1500, 0)
    assert animation.state is AnimationState.PLAY
    assert animation.index == 0


def test_play_after_end_restarts_from_first_frame():
    animation = make()
    animation.update(0, 1000)
    animation.play()
    assert animation.state is AnimationState.PLAY
    assert animation.index == 0


def test_frame_set_after_end_is_kept_on_play():
    animation = make()
    animation.update(0, 1000)
    animation.set_current_frame(2)
    animation.play()
    assert animation.index == 2


def test_pause_only_from_play_or_cooldown():
    playing = make()
    playing.pause()
    assert playing.state is AnimationState.PAUSE
    ended = make()
    ended.update(0, 1000)
    ended.pause()
    assert ended.state is AnimationState.ENDED