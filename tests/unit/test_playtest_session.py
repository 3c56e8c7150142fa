"""Tests for WarSession."""

import json

from warsim.playtest.session import SessionConfig, WarSession
from warsim.simulation.events import Winner
from warsim.simulation.players import PlayerKind


class TestSessionConfig:
    """Tests for SessionConfig."""

    def test_default_config(self):
        """Default config has sensible values."""
        config = SessionConfig()

        assert config.player1_kind == PlayerKind.HUMAN
        assert config.player2_kind == PlayerKind.AI
        assert config.show_rounds is True
        assert config.results_path is None

    def test_seed_generation(self):
        """Generates seed if not provided."""
        assert SessionConfig().seed is not None
        assert SessionConfig(seed=5).seed == 5


class TestWarSession:
    """Tests for WarSession."""

    def test_run_outputs_game(self):
        lines: list[str] = []
        session = WarSession(SessionConfig(player1_name="Alice", player2_name="Bob", seed=12))

        result = session.run(output_fn=lines.append)
        output = "\n".join(lines)

        assert "Seed: 12" in output
        assert "Alice received 26 cards" in output
        assert "--- Round 1 ---" in output
        assert "=== GAME OVER ===" in output
        assert result.player1_name == "Alice"
        assert result.winner in list(Winner)

    def test_quiet_hides_rounds(self):
        lines: list[str] = []
        session = WarSession(SessionConfig(seed=12, show_rounds=False))
        session.run(output_fn=lines.append)

        output = "\n".join(lines)
        assert "--- Round" not in output
        assert "=== GAME OVER ===" in output

    def test_debug_shows_hands(self):
        lines: list[str] = []
        WarSession(SessionConfig(seed=1, debug=True)).run(output_fn=lines.append)

        assert any(line.startswith("Player 1 hand: [") for line in lines)

    def test_same_seed_replays(self):
        first = WarSession(SessionConfig(seed=77)).run(output_fn=lambda s: None)
        second = WarSession(SessionConfig(seed=77)).run(output_fn=lambda s: None)

        assert first.rounds == second.rounds

    def test_saves_jsonl(self, tmp_path):
        path = tmp_path / "results.jsonl"
        config = SessionConfig(seed=9, results_path=path)

        WarSession(config).run(output_fn=lambda s: None)
        WarSession(config).run(output_fn=lambda s: None)

        lines = path.read_text().splitlines()
        assert len(lines) == 2
        record = json.loads(lines[0])
        assert record["seed"] == 9
        assert "rounds" not in record
        assert record["winner"] in {"Player1Wins", "Player2Wins", "Tie"}
