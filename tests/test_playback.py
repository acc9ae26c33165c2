"""Tests for the run/stop/reset/preview state machine."""

import pytest


class TestPlaybackController:
    def test_initial_state(self, controller):
        """Stopped with preview on."""
        assert controller.running is False
        assert controller.preview_enabled is True
        assert controller.run_label == "Start"

    def test_start_draws_first_frame_synchronously(self, controller, canvas, scheduler):
        controller.toggle_run()
        assert controller.running is True
        assert controller.run_label == "Stop"
        assert len(controller.state.trail) == 1
        assert canvas.named("fill_circle")
        assert len(scheduler) == 1

    def test_loop_keeps_going_while_running(self, controller, scheduler):
        controller.toggle_run()
        for _ in range(10):
            scheduler.run_pending()
        assert len(controller.state.trail) == 11
        assert controller.state.time == pytest.approx(0.11)

    def test_stop_lets_pending_frame_finish(self, controller, scheduler):
        controller.toggle_run()
        scheduler.run_pending()
        controller.toggle_run()
        assert controller.running is False
        trail = len(controller.state.trail)

        scheduler.run_pending()
        assert len(controller.state.trail) == trail + 1
        scheduler.run_pending()
        assert len(controller.state.trail) == trail + 1
        # Nothing reverted
        assert controller.state.time > 0

    def test_toggle_run_twice_restores_flag(self, controller):
        before = controller.running
        controller.toggle_run()
        controller.toggle_run()
        assert controller.running == before

    def test_restart_before_pending_frame_does_not_double_speed(self, controller, scheduler):
        controller.toggle_run()
        controller.toggle_run()
        controller.toggle_run()
        assert len(scheduler) == 1
        scheduler.run_pending()
        assert len(scheduler) == 1

    @pytest.mark.parametrize("run_first", [False, True])
    def test_reset(self, controller, scheduler, run_first):
        if run_first:
            controller.toggle_run()
            scheduler.run_pending()
        controller.reset()
        assert controller.state.time == 0
        assert controller.state.trail == []
        assert controller.running is False

    def test_reset_is_idempotent(self, controller, canvas):
        controller.reset()
        first = list(canvas.calls)
        canvas.reset_calls()
        controller.reset()
        assert canvas.calls == first
        assert controller.state.trail == []

    def test_reset_redraws_resting_indicator(self, controller, canvas, engine):
        controller.toggle_run()
        canvas.reset_calls()
        controller.reset()
        _, x, y, _, _ = canvas.named("fill_circle")[-1]
        assert (x, y) == engine.to_screen(engine.initial_point())

    def test_reset_while_running_stops_after_pending_frame(self, controller, scheduler):
        controller.toggle_run()
        controller.reset()
        scheduler.run_pending()
        # The in-flight frame lands once, then the loop is over
        assert len(controller.state.trail) == 1
        assert len(scheduler) == 0

    def test_enabling_preview_clears_trail_and_draws_preview(self, controller, canvas, engine):
        controller.toggle_preview()
        for _ in range(3):
            engine.step()
        assert len(controller.state.trail) == 3

        canvas.reset_calls()
        controller.toggle_preview()
        assert controller.preview_enabled is True
        assert controller.state.trail == []
        strokes = canvas.named("stroke_path")
        assert len(strokes) == 1
        assert strokes[0][2] == engine.cfg.preview_color

    def test_disabling_preview_redraws_resting_only(self, controller, canvas):
        canvas.reset_calls()
        controller.toggle_preview()
        assert controller.preview_enabled is False
        assert [c[0] for c in canvas.calls] == ["clear", "fill_circle"]

    def test_toggle_preview_twice_restores_view(self, controller, canvas):
        controller.show()
        before = list(canvas.calls)
        canvas.reset_calls()
        controller.toggle_preview()
        controller.toggle_preview()
        after = canvas.calls[-3:]
        assert controller.preview_enabled is True
        assert after == before

    def test_preview_while_running_is_replaced_by_next_frame(self, controller, canvas, scheduler):
        controller.toggle_preview()
        controller.toggle_run()
        controller.toggle_preview()
        assert controller.state.trail == []
        canvas.reset_calls()
        scheduler.run_pending()
        assert [c[0] for c in canvas.calls] == ["clear", "stroke_path", "fill_circle"]
        assert canvas.named("stroke_path")[0][2] == controller.engine.cfg.trail_color

    def test_update_params_while_stopped_redraws(self, controller, canvas, params):
        canvas.reset_calls()
        controller.update_params({"amp_x": "40"}, source="amp_x")
        assert params.amp_x == 40.0
        assert canvas.calls[0] == ("clear",)
        assert canvas.named("fill_circle")

    def test_update_params_bad_input_does_not_raise(self, controller, params):
        controller.update_params({"amp_x": "oops"}, source="amp_x")
        assert params.amp_x == 100.0

    def test_update_params_while_running_waits_for_next_frame(self, controller, canvas, params, scheduler):
        controller.toggle_run()
        canvas.reset_calls()
        controller.update_params({"amp_y": "0"}, source="amp_y")
        assert canvas.calls == []
        scheduler.run_pending()
        _, x, y, _, _ = canvas.named("fill_circle")[-1]
        assert y == pytest.approx(canvas.height / 2)
