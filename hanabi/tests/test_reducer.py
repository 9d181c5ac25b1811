"""
Tests for the reducer (state transitions).

Tests:
- Play, discard and hint application
- Token accounting
- End-game countdown and turn rotation
- Validation and error handling
- Purity
"""

import pytest

from ..engine_core.state import Card, Color, HintMark, Tokens
from ..engine_core.action import Action, HintType
from ..engine_core.reducer import (
    Reducer,
    apply_action,
    commit_action,
    is_game_over,
    is_playable,
)
from ..engine_core.errors import (
    TurnViolation,
    HandConsistencyViolation,
    HintResourceViolation,
    SelfHintViolation,
    InvalidHintViolation,
    UnknownActionViolation,
)
from .conftest import B, R, G, W, Y


class TestDiscardAction:
    """Tests for discard action."""

    def test_discard_moves_card_and_draws(self, two_player_state):
        """Discarding puts the card on the discard pile and draws from the top."""
        state = two_player_state
        new_state = commit_action(state, Action.discard(0, 1, Card(B, 3)))

        assert new_state.discard_pile == (Card(B, 3),)
        assert new_state.players[0].cards == (
            Card(Y, 1), Card(R, 1), Card(G, 1), Card(W, 5), Card(Y, 2)
        )
        assert new_state.draw_pile == (Card(B, 2), Card(G, 2))

    def test_discard_keeps_tokens(self, two_player_state):
        new_state = commit_action(two_player_state, Action.discard(0, 1, Card(B, 3)))
        assert new_state.tokens == two_player_state.tokens

    def test_discard_example_from_fresh_game(self, fresh_game):
        """Fresh 3-player game: first discard draws, keeps the counter, passes the turn."""
        state = fresh_game
        player = state.current
        action = Action.discard(player.id, 0, player.hand[0].card)

        new_state = commit_action(state, action)

        assert len(new_state.draw_pile) == 34
        assert len(new_state.players[player.id].hand) == 5
        assert new_state.players[player.id].hand[0].card == state.draw_pile[-1]
        assert new_state.actions_left == state.actions_left
        assert new_state.current_player == (player.id + 1) % 3

    def test_drawn_card_has_empty_hint(self, two_player_state):
        new_state = commit_action(two_player_state, Action.discard(0, 0, Card(R, 1)))
        hint = new_state.players[0].hand[0].hint
        assert all(mark == HintMark.POSSIBLE for mark in hint.numbers)


class TestPlayAction:
    """Tests for play action."""

    def test_play_one_on_empty_stacks(self, two_player_state):
        new_state = commit_action(two_player_state, Action.play(0, 0, Card(R, 1)))

        assert new_state.played_cards == (Card(R, 1),)
        assert new_state.discard_pile == ()
        assert new_state.tokens.strikes == 3
        assert new_state.players[0].cards[0] == Card(Y, 1)

    def test_misplay_strikes_and_discards(self, two_player_state):
        """A 3 on empty stacks costs a strike and lands in the discard pile."""
        new_state = commit_action(two_player_state, Action.play(0, 1, Card(B, 3)))

        assert new_state.tokens.strikes == 2
        assert new_state.discard_pile == (Card(B, 3),)
        assert new_state.played_cards == ()
        assert len(new_state.players[0].hand) == 5

    def test_play_extends_its_color(self, make_state):
        state = make_state(
            hands=[[Card(R, 2)], [Card(B, 1)]],
            played_cards=[Card(R, 1)],
            draw_pile=[Card(G, 1)],
        )
        new_state = commit_action(state, Action.play(0, 0, Card(R, 2)))
        assert new_state.played_cards == (Card(R, 1), Card(R, 2))

    def test_duplicate_is_a_misplay(self, make_state):
        state = make_state(
            hands=[[Card(R, 1)], [Card(B, 1)]],
            played_cards=[Card(R, 1)],
            draw_pile=[Card(G, 1)],
        )
        new_state = commit_action(state, Action.play(0, 0, Card(R, 1)))
        assert new_state.played_cards == (Card(R, 1),)
        assert new_state.tokens.strikes == 2

    def test_five_wins_a_hint(self, make_state):
        state = make_state(
            hands=[[Card(R, 5)], [Card(B, 1)]],
            played_cards=[Card(R, n) for n in range(1, 5)],
            draw_pile=[Card(G, 1)],
            tokens=Tokens(hints=5, strikes=3),
        )
        new_state = commit_action(state, Action.play(0, 0, Card(R, 5)))
        assert new_state.tokens.hints == 6

    def test_five_does_not_exceed_hint_cap(self, make_state):
        state = make_state(
            hands=[[Card(R, 5)], [Card(B, 1)]],
            played_cards=[Card(R, n) for n in range(1, 5)],
            draw_pile=[Card(G, 1)],
        )
        new_state = commit_action(state, Action.play(0, 0, Card(R, 5)))
        assert new_state.tokens.hints == 8

    def test_misplay_never_raises_strikes(self, make_state):
        state = make_state(
            hands=[[Card(R, 4)], [Card(B, 1)]],
            draw_pile=[Card(G, 1)],
            tokens=Tokens(hints=8, strikes=1),
        )
        new_state = commit_action(state, Action.play(0, 0, Card(R, 4)))
        assert new_state.tokens.strikes == 0


class TestIsPlayable:
    """Tests for the playability rule."""

    @pytest.mark.parametrize("color", [B, R, G, W, Y, Color.MULTICOLOR])
    def test_one_playable_on_empty(self, color):
        assert is_playable(Card(color, 1), ())

    def test_needs_previous_number(self):
        played = (Card(R, 1), Card(R, 2))
        assert is_playable(Card(R, 3), played)
        assert not is_playable(Card(R, 4), played)

    def test_previous_must_be_same_color(self):
        assert not is_playable(Card(B, 2), (Card(R, 1),))

    def test_already_played_is_not_playable(self):
        played = (Card(R, 1), Card(R, 2))
        assert not is_playable(Card(R, 1), played)
        assert not is_playable(Card(R, 2), played)


class TestHintAction:
    """Tests for hint action."""

    def test_color_hint(self, two_player_state):
        """Matching cards get the color confirmed, the rest lose that color."""
        new_state = commit_action(two_player_state, Action.hint(0, 1, HintType.COLOR, R))
        hand = new_state.players[1].hand

        for hc in hand[:2]:
            assert hc.hint.confirmed_color == R
            assert hc.hint.possible_colors == (R,)
        for hc in hand[2:]:
            assert hc.hint.color_mark(R) == HintMark.IMPOSSIBLE
            assert hc.hint.color_mark(B) == HintMark.POSSIBLE
            assert hc.hint.confirmed_color is None

    def test_number_hint(self, two_player_state):
        new_state = commit_action(two_player_state, Action.hint(0, 1, HintType.NUMBER, 1))
        hand = new_state.players[1].hand

        confirmed = [hc.hint.confirmed_number for hc in hand]
        assert confirmed == [None, 1, 1, None, 1]
        assert hand[0].hint.number_mark(1) == HintMark.IMPOSSIBLE
        assert hand[0].hint.number_mark(2) == HintMark.POSSIBLE

    def test_hint_leaves_other_dimension_alone(self, two_player_state):
        new_state = commit_action(two_player_state, Action.hint(0, 1, HintType.NUMBER, 1))
        for hc in new_state.players[1].hand:
            assert hc.hint.colors == two_player_state.players[1].hand[0].hint.colors

    def test_hint_spends_token_and_moves_nothing(self, two_player_state):
        state = two_player_state
        new_state = commit_action(state, Action.hint(0, 1, HintType.COLOR, R))

        assert new_state.tokens.hints == 7
        assert new_state.draw_pile == state.draw_pile
        assert new_state.players[1].cards == state.players[1].cards
        assert new_state.players[0] == state.players[0]

    def test_confirmation_survives_later_hints(self, make_state):
        state = make_state(hands=[[Card(B, 1)], [Card(R, 2), Card(B, 2)]], draw_pile=[Card(G, 1)])
        state = commit_action(state, Action.hint(0, 1, HintType.COLOR, R))
        state = state._copy_with(current_player=0)
        state = commit_action(state, Action.hint(0, 1, HintType.COLOR, B))

        first, second = state.players[1].hand
        assert first.hint.confirmed_color == R
        assert second.hint.confirmed_color == B
        assert first.hint.color_mark(B) == HintMark.IMPOSSIBLE

    def test_hint_without_tokens(self, two_player_state):
        state = two_player_state._copy_with(tokens=Tokens(hints=0, strikes=3))
        with pytest.raises(HintResourceViolation):
            commit_action(state, Action.hint(0, 1, HintType.COLOR, R))

    def test_self_hint(self, two_player_state):
        with pytest.raises(SelfHintViolation):
            commit_action(two_player_state, Action.hint(0, 0, HintType.NUMBER, 1))

    def test_hint_unknown_player(self, two_player_state):
        with pytest.raises(InvalidHintViolation):
            commit_action(two_player_state, Action.hint(0, 4, HintType.NUMBER, 1))

    def test_multicolor_hint_when_not_in_play(self, two_player_state):
        with pytest.raises(InvalidHintViolation):
            commit_action(two_player_state, Action.hint(0, 1, HintType.COLOR, Color.MULTICOLOR))

    def test_number_hint_out_of_range(self, two_player_state):
        with pytest.raises(InvalidHintViolation):
            commit_action(two_player_state, Action.hint(0, 1, HintType.NUMBER, 6))


class TestTurnAndCountdown:
    """Tests for turn rotation and the end-game countdown."""

    def test_turn_rotates_after_every_kind(self, make_state):
        state = make_state(
            hands=[[Card(R, 1)], [Card(B, 3)], [Card(G, 1)]],
            draw_pile=[Card(W, 1)] * 5,
        )
        state = commit_action(state, Action.play(0, 0, Card(R, 1)))
        assert state.current_player == 1
        state = commit_action(state, Action.play(1, 0, Card(B, 3)))  # misplay
        assert state.current_player == 2
        state = commit_action(state, Action.hint(2, 0, HintType.NUMBER, 1))
        assert state.current_player == 0

    def test_countdown_idle_while_pile_has_cards(self, two_player_state):
        new_state = commit_action(two_player_state, Action.discard(0, 0, Card(R, 1)))
        assert new_state.actions_left == two_player_state.actions_left

    def test_countdown_starts_when_last_card_drawn(self, make_state):
        state = make_state(hands=[[Card(R, 1)], [Card(B, 1)]], draw_pile=[Card(G, 1)])
        new_state = commit_action(state, Action.discard(0, 0, Card(R, 1)))
        assert new_state.draw_pile == ()
        assert new_state.actions_left == state.actions_left - 1

    def test_hand_shrinks_on_empty_pile(self, make_state):
        state = make_state(hands=[[Card(R, 1), Card(R, 2)], [Card(B, 1)]], actions_left=2)
        new_state = commit_action(state, Action.discard(0, 0, Card(R, 1)))
        assert new_state.players[0].cards == (Card(R, 2),)
        assert new_state.actions_left == 1

    def test_hints_count_down_on_empty_pile(self, make_state):
        state = make_state(hands=[[Card(R, 1)], [Card(B, 1)]], actions_left=3)
        new_state = commit_action(state, Action.hint(0, 1, HintType.NUMBER, 1))
        assert new_state.actions_left == 2

    def test_one_round_after_exhaustion(self, make_state):
        """Once the pile is empty each player gets exactly one more turn."""
        state = make_state(
            hands=[[Card(R, 1), Card(R, 2)], [Card(B, 1), Card(B, 2)], [Card(G, 1), Card(G, 2)]],
            draw_pile=[Card(W, 1)],
            actions_left=4,
        )
        turns = 0
        while not is_game_over(state):
            player = state.current
            state = commit_action(state, Action.discard(player.id, 0, player.hand[0].card))
            turns += 1
        assert turns == 4
        assert state.actions_left == 0


class TestValidation:
    """Tests for rejected actions."""

    def test_wrong_player(self, two_player_state):
        with pytest.raises(TurnViolation) as exc_info:
            commit_action(two_player_state, Action.discard(1, 0, Card(R, 2)))
        assert exc_info.value.code == "NOT_YOUR_TURN"

    def test_declared_card_mismatch(self, two_player_state):
        with pytest.raises(HandConsistencyViolation):
            commit_action(two_player_state, Action.play(0, 0, Card(B, 3)))

    def test_index_out_of_range(self, two_player_state):
        with pytest.raises(HandConsistencyViolation):
            commit_action(two_player_state, Action.discard(0, 7, Card(R, 1)))

    def test_apply_returns_failure_instead_of_raising(self, two_player_state):
        result = apply_action(two_player_state, Action.discard(1, 0, Card(R, 2)))
        assert not result.success
        assert result.error_code == "NOT_YOUR_TURN"
        assert result.new_state is None
        assert "turn" in result.error.lower()

    def test_unknown_action_kind(self, two_player_state):
        """An action of no known kind is a rule violation, not a crash."""
        action = Action(action_type="pass", from_player=0)

        with pytest.raises(UnknownActionViolation):
            commit_action(two_player_state, action)

        result = apply_action(two_player_state, action)
        assert not result.success
        assert result.error_code == "INVALID_ACTION"

    def test_apply_success(self, two_player_state):
        result = apply_action(two_player_state, Action.play(0, 0, Card(R, 1)))
        assert result.success
        assert result.new_state.played_cards == (Card(R, 1),)
        assert result.state_changes == ["played red 1"]

    @pytest.mark.parametrize("action,code", [
        (Action.play(0, 0, Card(G, 4)), "HAND_MISMATCH"),
        (Action.hint(0, 0, HintType.COLOR, R), "SELF_HINT"),
        (Action.hint(0, 1, HintType.COLOR, Color.MULTICOLOR), "INVALID_HINT"),
    ])
    def test_error_codes(self, two_player_state, action, code):
        result = Reducer().apply(two_player_state, action)
        assert result.error_code == code


class TestPurity:
    """The input state is never modified."""

    def test_commit_leaves_input_untouched(self, two_player_state):
        state = two_player_state
        hand_before = state.players[0].hand
        pile_before = state.draw_pile

        commit_action(state, Action.play(0, 1, Card(B, 3)))
        commit_action(state, Action.hint(0, 1, HintType.COLOR, R))

        assert state.players[0].hand is hand_before
        assert state.draw_pile is pile_before
        assert state.tokens == Tokens()
        assert state.current_player == 0

    def test_untouched_players_are_shared(self, two_player_state):
        new_state = commit_action(two_player_state, Action.discard(0, 0, Card(R, 1)))
        assert new_state.players[1] is two_player_state.players[1]


class TestGameOver:
    """Tests for end-of-game detection."""

    def test_fresh_game_not_over(self, fresh_game):
        assert not is_game_over(fresh_game)

    def test_out_of_strikes(self, two_player_state):
        state = two_player_state._copy_with(tokens=Tokens(hints=8, strikes=0))
        assert is_game_over(state)

    def test_out_of_actions(self, two_player_state):
        assert is_game_over(two_player_state._copy_with(actions_left=0))

    def test_perfect_game(self, make_state):
        played = [Card(c, n) for c in (B, R, G, W, Y) for n in range(1, 6)]
        state = make_state(hands=[[], []], played_cards=played)
        assert state.max_score == 25
        assert is_game_over(state)

    def test_perfect_multicolor_game_needs_thirty(self, make_state):
        played = [Card(c, n) for c in (B, R, G, W, Y) for n in range(1, 6)]
        state = make_state(hands=[[], []], played_cards=played, multicolor=True)
        assert state.max_score == 30
        assert not is_game_over(state)

    def test_commit_still_runs_when_over(self, two_player_state):
        state = two_player_state._copy_with(tokens=Tokens(hints=8, strikes=0))
        new_state = commit_action(state, Action.discard(0, 0, Card(R, 1)))
        assert new_state.current_player == 1
