"""
Crazy Eights Game Implementation.

One human against up to three computer opponents. Match the top card of the
discard pile by suit or rank; an 8 is wild and lets its player name the next
suit. First player to empty their hand wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..base import Game, Player, BOT_NAMES
from ...game_utils.actions import Action, ActionSet, Visibility
from ...game_utils.bot_helper import BotHelper
from ...game_utils.cards import Card, Deck, SUITS, WILD_RANK, card_name, create_deck, suit_name
from ...game_utils.game_result import GameResult, PlayerResult
from ...game_utils.options import GameOptions, IntOption, BoolOption, option_field
from ...messages.localization import Localization
from ...users.base import User
from ...users.bot import Bot
from .bot import bot_think as _bot_think, choose_suit as _bot_choose_suit
from .state import GameStatus, GameSnapshot, HandView, LastAction, localize_args


HUMAN_PLAYER_ID = "player"

SOUND_SHUFFLE = "shuffle.ogg"
SOUND_DEAL = "deal.ogg"
SOUND_PLAY = "play.ogg"
SOUND_WILD = "wild.ogg"
SOUND_SUIT = "suit.ogg"
SOUND_DRAW = "draw.ogg"
SOUND_SKIP = "skip.ogg"
SOUND_WIN = "win.ogg"
SOUND_LOSE = "lose.ogg"
MUSIC = "bgm.ogg"


class DealError(RuntimeError):
    """The deck holds no card that can open the discard pile."""


@dataclass
class CrazyEightsOptions(GameOptions):
    ai_count: int = option_field(
        IntOption(
            default=3, min_val=1, max_val=3, value_key="count",
            label="crazyeights-option-ai-count",
        )
    )
    hand_size: int = option_field(
        IntOption(
            default=8, min_val=1, max_val=8, value_key="count",
            label="crazyeights-option-hand-size",
        )
    )
    ai_delay_ticks: int = option_field(
        IntOption(
            default=30, min_val=0, max_val=200, value_key="ticks",
            label="crazyeights-option-ai-delay",
        )
    )
    show_landing: bool = option_field(
        BoolOption(default=True, label="crazyeights-option-show-landing")
    )


@dataclass
class CrazyEightsPlayer(Player):
    hand: list[Card] = field(default_factory=list)


@dataclass
class CrazyEightsGame(Game):
    """
    Crazy Eights table.

    Status machine: landing -> playing <-> suit_picking -> game_over. Only a
    human ever sits in suit_picking; bots name their suit in the same move as
    the 8. Every transition ends in ``_commit()``, which bumps the state
    version and publishes a snapshot and fresh menus to every user.
    """

    players: list[CrazyEightsPlayer] = field(default_factory=list)
    options: CrazyEightsOptions = field(default_factory=CrazyEightsOptions)
    status: GameStatus = GameStatus.LANDING

    deck: Deck = field(default_factory=Deck)
    discard_pile: list[Card] = field(default_factory=list)  # newest first
    current_suit: str | None = None
    current_rank: str | None = None

    winner_id: str | None = None
    last_action: LastAction | None = None
    turns_taken: int = 0

    @classmethod
    def get_name(cls) -> str:
        return "Crazy Eights"

    @classmethod
    def get_type(cls) -> str:
        return "crazyeights"

    @classmethod
    def get_min_players(cls) -> int:
        return 2

    @classmethod
    def get_max_players(cls) -> int:
        return 4

    def create_player(
        self, player_id: str, name: str, is_bot: bool = False
    ) -> CrazyEightsPlayer:
        return CrazyEightsPlayer(id=player_id, name=name, is_bot=is_bot)

    def seat_players(self, human_name: str, human_user: User) -> None:
        """Seat the human first, then ``options.ai_count`` bots as ai1..aiN."""
        self.add_player(human_name, human_user, player_id=HUMAN_PLAYER_ID)
        for i in range(self.options.ai_count):
            name = BOT_NAMES[i % len(BOT_NAMES)]
            self.add_player(name, Bot(name), player_id=f"ai{i + 1}")

    @property
    def top_card(self) -> Card | None:
        return self.discard_pile[0] if self.discard_pile else None

    def prestart_validate(self) -> list[str]:
        errors = []
        if len(self.players) < self.get_min_players():
            errors.append("game-error-not-enough-players")
        if len(self.players) > self.get_max_players():
            errors.append("game-error-too-many-players")
        return errors

    # ==========================================================================
    # Action sets
    # ==========================================================================

    def create_action_sets(self, player: Player) -> list[ActionSet]:
        user = self.get_user(player)
        locale = user.locale if user else "en"

        # Cards are added per hand by _sync_hand_actions.
        hand_set = ActionSet(name="hand")

        turn_set = ActionSet(name="turn")
        turn_set.add(
            Action(
                id="start",
                label=Localization.get(locale, "crazyeights-start"),
                handler="_action_start",
                is_enabled="_is_start_enabled",
                is_hidden="_is_landing_hidden",
            )
        )
        turn_set.add(
            Action(
                id="rules",
                label=Localization.get(locale, "crazyeights-rules-action"),
                handler="_action_rules",
                is_enabled="_is_start_enabled",
                is_hidden="_is_landing_hidden",
            )
        )
        turn_set.add(
            Action(
                id="draw",
                label=Localization.get(locale, "crazyeights-draw"),
                handler="_action_draw",
                is_enabled="_is_draw_enabled",
                is_hidden="_is_draw_hidden",
                get_label="_get_draw_label",
            )
        )
        for suit in SUITS:
            turn_set.add(
                Action(
                    id=f"suit_{suit}",
                    label=suit_name(suit, locale),
                    handler="_action_choose_suit",
                    is_enabled="_is_choose_suit_enabled",
                    is_hidden="_is_choose_suit_hidden",
                )
            )
        turn_set.add(
            Action(
                id="restart",
                label=Localization.get(locale, "crazyeights-restart"),
                handler="_action_restart",
                is_enabled="_is_restart_enabled",
                is_hidden="_is_restart_hidden",
            )
        )
        return [hand_set, turn_set]

    def _sync_hand_actions(self, player: Player) -> None:
        """Keep one play_card_<id> action per card in the player's hand."""
        hand_set = self.get_action_set(player, "hand")
        if hand_set is None or not isinstance(player, CrazyEightsPlayer):
            return
        hand_set.remove_by_prefix("play_card_")
        for card in player.hand:
            hand_set.add(
                Action(
                    id=f"play_card_{card.id}",
                    label=card.short,
                    handler="_action_play_card",
                    is_enabled="_is_play_card_enabled",
                    is_hidden="_is_play_card_hidden",
                    get_label="_get_card_label",
                    per_id=True,
                )
            )

    def execute_action(self, player: Player, action_id: str) -> bool:
        self._sync_hand_actions(player)
        return super().execute_action(player, action_id)

    def rebuild_player_menu(self, player: Player) -> None:
        self._sync_hand_actions(player)
        super().rebuild_player_menu(player)

    def _card_in_hand(self, player: Player, action_id: str | None) -> Card | None:
        if not action_id or not isinstance(player, CrazyEightsPlayer):
            return None
        card_id = action_id.removeprefix("play_card_")
        for card in player.hand:
            if card.id == card_id:
                return card
        return None

    def _is_players_turn(self, player: Player) -> bool:
        current = self.current_player
        return current is not None and current.id == player.id

    # ==========================================================================
    # is_enabled / is_hidden / get_label callbacks
    # ==========================================================================

    def _turn_disabled_reason(self, player: Player) -> str | None:
        if self.status == GameStatus.GAME_OVER:
            return "crazyeights-game-over"
        if self.status == GameStatus.LANDING or not self.game_active:
            return "action-not-playing"
        if not self._is_players_turn(player):
            return "action-not-your-turn"
        if self.status == GameStatus.SUIT_PICKING:
            return "crazyeights-choose-suit-first"
        return None

    def _is_play_card_enabled(
        self, player: Player, *, action_id: str | None = None
    ) -> str | None:
        reason = self._turn_disabled_reason(player)
        if reason:
            return reason
        card = self._card_in_hand(player, action_id)
        if card is None:
            return "action-not-available"
        if not self.is_playable(card):
            return "crazyeights-card-not-playable"
        return None

    def _is_play_card_hidden(
        self, player: Player, *, action_id: str | None = None
    ) -> Visibility:
        if self.status != GameStatus.PLAYING or not self._is_players_turn(player):
            return Visibility.HIDDEN
        return Visibility.VISIBLE

    def _get_card_label(self, player: Player, action_id: str) -> str:
        card = self._card_in_hand(player, action_id)
        if card is None:
            return action_id
        user = self.get_user(player)
        return card_name(card, user.locale if user else "en")

    def _is_draw_enabled(self, player: Player) -> str | None:
        return self._turn_disabled_reason(player)

    def _is_draw_hidden(self, player: Player) -> Visibility:
        if self.status != GameStatus.PLAYING or not self._is_players_turn(player):
            return Visibility.HIDDEN
        return Visibility.VISIBLE

    def _get_draw_label(self, player: Player, action_id: str) -> str:
        user = self.get_user(player)
        locale = user.locale if user else "en"
        if self.deck.is_empty():
            return Localization.get(locale, "crazyeights-draw-empty")
        return Localization.get(locale, "crazyeights-draw-count", count=self.deck.size())

    def _is_choose_suit_enabled(self, player: Player) -> str | None:
        if self.status != GameStatus.SUIT_PICKING:
            return "crazyeights-no-suit-to-choose"
        if not self._is_players_turn(player):
            return "action-not-your-turn"
        return None

    def _is_choose_suit_hidden(self, player: Player) -> Visibility:
        if self._is_choose_suit_enabled(player) is None:
            return Visibility.VISIBLE
        return Visibility.HIDDEN

    def _is_start_enabled(self, player: Player) -> str | None:
        if player.is_bot:
            return "action-not-available"
        if self.status != GameStatus.LANDING:
            return "action-not-available"
        return None

    def _is_landing_hidden(self, player: Player) -> Visibility:
        if self.status == GameStatus.LANDING and not player.is_bot:
            return Visibility.VISIBLE
        return Visibility.HIDDEN

    def _is_restart_enabled(self, player: Player) -> str | None:
        if player.is_bot:
            return "action-not-available"
        return None

    def _is_restart_hidden(self, player: Player) -> Visibility:
        if self.status == GameStatus.LANDING or player.is_bot:
            return Visibility.HIDDEN
        return Visibility.VISIBLE

    # ==========================================================================
    # Action handlers
    # ==========================================================================

    def _action_start(self, player: Player, action_id: str) -> None:
        self._deal()

    def _action_rules(self, player: Player, action_id: str) -> None:
        user = self.get_user(player)
        if user:
            user.speak_l("crazyeights-rules")

    def _action_restart(self, player: Player, action_id: str) -> None:
        self._deal()

    def _action_play_card(self, player: Player, action_id: str) -> None:
        if self.status != GameStatus.PLAYING or not self._is_players_turn(player):
            return
        card = self._card_in_hand(player, action_id)
        if card is None or not self.is_playable(card):
            return

        player.hand.remove(card)
        self.discard_pile.insert(0, card)

        if not card.is_wild:
            self._set_match(card.suit, card.rank)
            self.play_sound(SOUND_PLAY)
            self._announce("crazyeights-plays", player=player.name, card=card.id)
            self._end_turn()
            return

        self.play_sound(SOUND_WILD)
        if player.is_bot:
            suit = _bot_choose_suit(player.hand)
            self._set_match(suit, WILD_RANK)
            self._announce(
                "crazyeights-plays-wild-chose", player=player.name, card=card.id, suit=suit
            )
            self._end_turn()
            return

        # The human names the suit next; no win check until they have.
        self.status = GameStatus.SUIT_PICKING
        self._announce("crazyeights-plays-wild", player=player.name, card=card.id)
        user = self.get_user(player)
        if user:
            user.speak_l("crazyeights-choose-suit")
        self._commit()

    def _action_choose_suit(self, player: Player, action_id: str) -> None:
        if self.status != GameStatus.SUIT_PICKING or not self._is_players_turn(player):
            return
        suit = action_id.removeprefix("suit_")
        if suit not in SUITS:
            return

        self.status = GameStatus.PLAYING
        self._set_match(suit, WILD_RANK)
        self.play_sound(SOUND_SUIT)
        self._announce("crazyeights-suit-chosen", player=player.name, suit=suit)
        self._end_turn()

    def _action_draw(self, player: Player, action_id: str) -> None:
        if self.status != GameStatus.PLAYING or not self._is_players_turn(player):
            return

        card = self.deck.draw_one()
        if card is None:
            self.play_sound(SOUND_SKIP)
            self._announce("crazyeights-skips", player=player.name)
        else:
            player.hand.append(card)
            self.play_sound(SOUND_DRAW)
            self._announce("crazyeights-draws", player=player.name)
            user = self.get_user(player)
            if user and not player.is_bot:
                user.speak_l("crazyeights-you-drew", card=card_name(card, user.locale))
        self._end_turn()

    # ==========================================================================
    # Public API
    # ==========================================================================

    def is_playable(self, card: Card) -> bool:
        """An 8 always; otherwise the card must match the active suit or rank."""
        if card.is_wild:
            return True
        return card.suit == self.current_suit or card.rank == self.current_rank

    def play_card(self, card: Card | str, player_id: str = HUMAN_PLAYER_ID) -> bool:
        player = self.get_player_by_id(player_id)
        if player is None:
            return False
        card_id = card.id if isinstance(card, Card) else card
        return self.execute_action(player, f"play_card_{card_id}")

    def draw_card(self, player_id: str = HUMAN_PLAYER_ID) -> bool:
        player = self.get_player_by_id(player_id)
        if player is None:
            return False
        return self.execute_action(player, "draw")

    def choose_suit(self, suit: str, player_id: str | None = None) -> bool:
        """Name the suit after a human's 8. Defaults to the player whose turn it is."""
        player = self.get_player_by_id(player_id) if player_id else self.current_player
        if player is None:
            return False
        return self.execute_action(player, f"suit_{suit}")

    def start(self, player_id: str = HUMAN_PLAYER_ID) -> bool:
        """Leave the landing screen and deal."""
        player = self.get_player_by_id(player_id)
        if player is None:
            return False
        return self.execute_action(player, "start")

    def restart(self) -> bool:
        """Throw the table away and deal a fresh game. Allowed in any status."""
        self._deal()
        return True

    def snapshot(self) -> GameSnapshot:
        current = self.current_player
        in_turn = self.status in (GameStatus.PLAYING, GameStatus.SUIT_PICKING)
        last_action = None
        if self.last_action is not None:
            last_action = LastAction(self.last_action.message_id, dict(self.last_action.args))
        return GameSnapshot(
            version=self.state_version,
            status=self.status,
            turn=current.id if current and in_turn else None,
            winner=self.winner_id,
            deck_count=self.deck.size(),
            hands=tuple(
                HandView(player_id=p.id, name=p.name, is_bot=p.is_bot, cards=tuple(p.hand))
                for p in self.players
            ),
            discard_top=self.top_card,
            discard_count=len(self.discard_pile),
            current_suit=self.current_suit,
            current_rank=self.current_rank,
            last_action=last_action,
        )

    # ==========================================================================
    # Game flow
    # ==========================================================================

    def on_start(self) -> None:
        errors = self.prestart_validate()
        if errors:
            for error in errors:
                self.broadcast_l(error)
            return

        self.game_active = True
        self.play_music(MUSIC)
        if self.options.show_landing and self.get_human_players():
            self.status = GameStatus.LANDING
            self._announce("crazyeights-welcome")
            self._commit()
            return
        self._deal()

    def _deal(self) -> None:
        """Fresh deck and hands. Raises DealError if no opening card exists.

        Nothing on the table changes until the opening card is found.
        """
        deck = create_deck()
        hand_size = self.options.hand_size
        hands = []
        for _ in self.players:
            hands.append(deck.cards[:hand_size])
            del deck.cards[:hand_size]
        opening = self._take_opening_card(deck)

        for player, hand in zip(self.players, hands):
            BotHelper.cancel(player)
            player.hand = hand
        self.clear_scheduled_sounds()
        self.deck = deck
        self.discard_pile = [opening]
        self._set_match(opening.suit, opening.rank)

        self.set_turn_players(self.players)
        self.winner_id = None
        self.turns_taken = 0
        self.status = GameStatus.PLAYING
        self.game_active = True

        self.play_sound(SOUND_SHUFFLE)
        self.schedule_sound(SOUND_DEAL, delay_ticks=10)
        self._announce("crazyeights-game-start", card=opening.id)
        self._start_turn()
        self._commit()

    @staticmethod
    def _take_opening_card(deck: Deck) -> Card:
        """Remove the bottom-most non-8 from the deck."""
        for i, card in enumerate(deck.cards):
            if not card.is_wild:
                return deck.cards.pop(i)
        raise DealError("no card other than an 8 left for the opening discard")

    def _set_match(self, suit: str, rank: str) -> None:
        self.current_suit = suit
        self.current_rank = rank

    def _start_turn(self) -> None:
        player = self.current_player
        if player is None:
            return
        BotHelper.jolt_bot(player, ticks=self.options.ai_delay_ticks)
        self.announce_turn()

    def _end_turn(self) -> None:
        self.turns_taken += 1
        winner = self._find_winner()
        if winner is not None:
            self._end_game(winner)
        else:
            self.advance_turn(announce=False)
            self._start_turn()
        self._commit()

    def _find_winner(self) -> CrazyEightsPlayer | None:
        if self.status == GameStatus.SUIT_PICKING:
            return None
        for player in self.turn_players:
            if not player.hand:
                return player
        return None

    def _end_game(self, winner: CrazyEightsPlayer) -> None:
        self.status = GameStatus.GAME_OVER
        self.winner_id = winner.id
        for player in self.players:
            BotHelper.cancel(player)
            user = self.get_user(player)
            if user:
                self.play_sound_for(user, SOUND_WIN if player is winner else SOUND_LOSE)
        self.stop_music()
        self.broadcast_personal_l(winner, "crazyeights-you-win", "crazyeights-winner")
        self.last_action = LastAction("crazyeights-winner", {"player": winner.name})
        self.finish_game()

    def _announce(self, message_id: str, **args: str) -> None:
        """Record the event as the last action and tell every user."""
        self.last_action = LastAction(message_id, dict(args))
        for player in self.players:
            user = self.get_user(player)
            if user:
                user.speak_l(message_id, **localize_args(args, user.locale))

    def _commit(self) -> None:
        """Finish a transition: bump the version, publish the snapshot and menus."""
        self.state_version += 1
        snapshot = self.snapshot()
        for player in self.players:
            user = self.get_user(player)
            if user:
                user.update_table(snapshot)
        self.rebuild_all_menus()

    def on_tick(self) -> None:
        super().on_tick()
        if not self.game_active:
            return
        BotHelper.on_tick(self)

    def bot_think(self, player: CrazyEightsPlayer) -> str | None:
        return _bot_think(self, player)

    # ==========================================================================
    # Results
    # ==========================================================================

    def build_game_result(self) -> GameResult:
        winner = self.get_player_by_id(self.winner_id) if self.winner_id else None
        return GameResult(
            game_type=self.get_type(),
            timestamp=datetime.now().isoformat(),
            duration_ticks=self.sound_scheduler_tick,
            player_results=[
                PlayerResult(
                    player_id=p.id,
                    player_name=p.name,
                    is_bot=p.is_bot,
                    cards_left=len(p.hand),
                )
                for p in self.players
            ],
            custom_data={
                "winner_id": winner.id if winner else None,
                "winner_name": winner.name if winner else None,
                "turns": self.turns_taken,
            },
        )

    def format_end_screen(self, result: GameResult, locale: str) -> list[str]:
        lines = []
        winner = result.get_winner()
        if winner:
            lines.append(Localization.get(locale, "crazyeights-winner", player=winner.player_name))
        for p in result.player_results:
            lines.append(
                Localization.get(
                    locale,
                    "crazyeights-end-cards-left",
                    player=p.player_name,
                    count=p.cards_left,
                )
            )
        lines.append(
            Localization.get(locale, "crazyeights-end-turns", count=result.custom_data.get("turns", 0))
        )
        return lines
