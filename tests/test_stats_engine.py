# tests/test_stats_engine.py

"""Unit tests for the pure statistics engine."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from wonderboard.exceptions import SnapshotIntegrityError
from wonderboard.schemas.game import GameParticipantRead, GameRead
from wonderboard.schemas.player import PlayerRead
from wonderboard.stats import engine

BASE_TIME = datetime(2024, 3, 1, 18, 0, tzinfo=timezone.utc)

# =============================================================================
# Helper Functions
# =============================================================================


def make_player(name: str) -> PlayerRead:
    """Helper to build a stored player."""
    return PlayerRead(id=uuid4(), name=name, created_at=BASE_TIME)


def make_game(*entries: tuple[PlayerRead, str, int], hours: int = 0) -> GameRead:
    """Helper to build a stored game from (player, wonder, score) entries."""
    return GameRead(
        id=uuid4(),
        created_at=BASE_TIME + timedelta(hours=hours),
        players=[
            GameParticipantRead(player_id=player.id, wonder_name=wonder, score=score)
            for player, wonder, score in entries
        ],
    )


@pytest.fixture
def league():
    """
    Four players and three games:

    - game 1: A wins outright
    - game 2: B wins outright
    - game 3: C and D tie on 66, C is listed first
    """
    a, b, c, d = (make_player(n) for n in ("Ann", "Ben", "Cat", "Dan"))
    games = [
        make_game((a, "alexandria", 60), (b, "babylon", 45), (c, "colossus", 52)),
        make_game((a, "gizah", 40), (b, "babylon", 70), (d, "olympia", 55), hours=1),
        make_game(
            (b, "alexandria", 30), (c, "colossus", 66), (d, "ephesos", 66), hours=2
        ),
    ]
    return {"players": [a, b, c, d], "games": games, "a": a, "b": b, "c": c, "d": d}


# =============================================================================
# Ranking
# =============================================================================


def test_rank_participants_orders_by_score_descending():
    """Participants come back highest score first."""
    a, b, c = make_player("A"), make_player("B"), make_player("C")
    game = make_game((a, "alexandria", 10), (b, "babylon", 30), (c, "gizah", 20))

    ranked = engine.rank_participants(game)

    assert [p.player_id for p in ranked] == [b.id, c.id, a.id]


def test_tie_at_top_goes_to_first_listed_participant():
    """
    Scenario: A alexandria 50, B gizah 80, C babylon 80 with B listed
    before C. B wins and is placed first, C second, A third.
    """
    a, b, c = make_player("A"), make_player("B"), make_player("C")
    game = make_game((a, "alexandria", 50), (b, "gizah", 80), (c, "babylon", 80))

    history = engine.get_game_history([a, b, c], [game])
    positions = {entry.player_id: entry.position for entry in history[0].players}
    assert positions == {b.id: 1, c.id: 2, a.id: 3}

    stats = {s.player_id: s for s in engine.calculate_player_stats([a, b, c], [game])}
    assert stats[b.id].wins == 1
    assert stats[c.id].wins == 0
    assert stats[a.id].wins == 0


def test_tie_winner_follows_listing_order_not_player_identity():
    """Swapping the listing order of the tied players swaps the winner."""
    a, b, c = make_player("A"), make_player("B"), make_player("C")
    game = make_game((a, "alexandria", 50), (c, "babylon", 80), (b, "gizah", 80))

    assert engine.winner_of(game).player_id == c.id


# =============================================================================
# Player statistics
# =============================================================================


def test_player_without_games_reports_zero_rates():
    """A player with no games gets 0 rather than NaN or a division error."""
    loner = make_player("Loner")

    (stats,) = engine.calculate_player_stats([loner], [])

    assert stats.total_games == 0
    assert stats.wins == 0
    assert stats.win_rate == 0
    assert stats.average_score == 0
    assert stats.wonder_stats == []


def test_player_stats_totals(league):
    """Totals, win rates (percent) and averages per player."""
    stats = {
        s.player_id: s
        for s in engine.calculate_player_stats(league["players"], league["games"])
    }

    ann = stats[league["a"].id]
    assert ann.player_name == "Ann"
    assert (ann.total_games, ann.wins) == (2, 1)
    assert ann.win_rate == 50.0
    assert ann.average_score == 50.0

    ben = stats[league["b"].id]
    assert (ben.total_games, ben.wins) == (3, 1)
    assert ben.win_rate == pytest.approx(100 / 3)
    assert ben.average_score == pytest.approx(145 / 3)

    cat = stats[league["c"].id]
    assert (cat.total_games, cat.wins) == (2, 1)
    assert cat.average_score == 59.0

    dan = stats[league["d"].id]
    assert (dan.total_games, dan.wins) == (2, 0)
    assert dan.win_rate == 0
    assert dan.average_score == 60.5


def test_player_stats_keep_player_order(league):
    """One record per player, in the order the players were given."""
    result = engine.calculate_player_stats(league["players"], league["games"])

    assert [s.player_name for s in result] == ["Ann", "Ben", "Cat", "Dan"]


def test_player_wonder_breakdown_omits_unplayed_wonders(league):
    """Only wonders the player actually played appear, in catalog order."""
    stats = {
        s.player_id: s
        for s in engine.calculate_player_stats(league["players"], league["games"])
    }

    ann_wonders = stats[league["a"].id].wonder_stats
    assert [w.wonder_name for w in ann_wonders] == ["alexandria", "gizah"]
    alexandria, gizah = ann_wonders
    assert alexandria.wonder_display_name == "The Lighthouse of Alexandria"
    assert (alexandria.games_played, alexandria.wins) == (1, 1)
    assert alexandria.win_rate == 100.0
    assert alexandria.average_score == 60.0
    assert (gizah.games_played, gizah.wins, gizah.win_rate) == (1, 0, 0)

    ben_babylon = next(
        w for w in stats[league["b"].id].wonder_stats if w.wonder_name == "babylon"
    )
    assert (ben_babylon.games_played, ben_babylon.wins) == (2, 1)
    assert ben_babylon.win_rate == 50.0
    assert ben_babylon.average_score == 57.5


# =============================================================================
# Wonder statistics
# =============================================================================


def test_wonder_stats(league):
    """Aggregates per wonder; the wonder never played is left out."""
    result = engine.calculate_wonder_stats(league["games"])

    assert [w.wonder_name for w in result] == [
        "alexandria",
        "babylon",
        "colossus",
        "ephesos",
        "gizah",
        "olympia",
    ]
    by_name = {w.wonder_name: w for w in result}

    assert (by_name["alexandria"].total_games, by_name["alexandria"].wins) == (2, 1)
    assert by_name["alexandria"].average_score == 45.0
    assert by_name["colossus"].win_rate == 50.0
    assert by_name["colossus"].average_score == 59.0
    assert (by_name["ephesos"].total_games, by_name["ephesos"].wins) == (1, 0)
    assert by_name["olympia"].wonder_display_name == "The Statue of Zeus at Olympia"


def test_wonder_stats_never_include_empty_wonders(league):
    """No entry ever has zero games, and an empty history gives no entries."""
    assert engine.calculate_wonder_stats([]) == []
    assert all(
        w.total_games > 0 for w in engine.calculate_wonder_stats(league["games"])
    )


# =============================================================================
# Game history
# =============================================================================


def test_history_newest_first(league):
    """Games are returned most recent first."""
    history = engine.get_game_history(league["players"], league["games"])

    assert [g.id for g in history] == [g.id for g in reversed(league["games"])]


def test_history_positions_are_sequential(league):
    """Positions run 1..N without gaps or repeats, ties included."""
    history = engine.get_game_history(league["players"], league["games"])

    for game in history:
        assert [p.position for p in game.players] == list(
            range(1, len(game.players) + 1)
        )
        scores = [p.score for p in game.players]
        assert scores == sorted(scores, reverse=True)


def test_history_resolves_names_at_read_time(league):
    """A renamed player shows the current name in past games."""
    renamed = league["a"].model_copy(update={"name": "Annabel"})
    players = [renamed, *league["players"][1:]]

    history = engine.get_game_history(players, league["games"])

    oldest = history[-1]
    assert oldest.players[0].player_name == "Annabel"
    assert oldest.players[0].wonder_display_name == "The Lighthouse of Alexandria"


def test_history_with_unknown_player_fails_fast(league):
    """A participant without a matching player is an integrity violation."""
    with pytest.raises(SnapshotIntegrityError):
        engine.get_game_history(league["players"][:3], league["games"])


def test_unknown_wonder_fails_fast():
    """A participant with a wonder outside the catalog is rejected."""
    a, b, c = make_player("A"), make_player("B"), make_player("C")
    game = make_game((a, "atlantis", 50), (b, "gizah", 40), (c, "babylon", 30))

    with pytest.raises(SnapshotIntegrityError):
        engine.calculate_wonder_stats([game])
    with pytest.raises(SnapshotIntegrityError):
        engine.calculate_player_stats([a, b, c], [game])


# =============================================================================
# Determinism
# =============================================================================


def test_calculations_are_idempotent(league):
    """Running every calculation twice on the same snapshot gives equal output."""
    players, games = league["players"], league["games"]

    assert engine.calculate_player_stats(players, games) == (
        engine.calculate_player_stats(players, games)
    )
    assert engine.calculate_wonder_stats(games) == engine.calculate_wonder_stats(games)
    assert engine.get_game_history(players, games) == (
        engine.get_game_history(players, games)
    )
