"""Message reaction types and the emoji reactions bots may use."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class ReactionTypeEmoji:
    """Reaction with a standard emoji."""

    emoji: str


@dataclass(frozen=True)
class ReactionTypeCustomEmoji:
    """Reaction with a custom emoji."""

    custom_emoji_id: str


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"ReactionType field {key!r} must be a string")
    return value


@dataclass(frozen=True)
class ReactionType:
    """Content of a reaction: either an emoji or a custom emoji."""

    emoji: ReactionTypeEmoji | None = None
    custom_emoji: ReactionTypeCustomEmoji | None = None

    @classmethod
    def of_emoji(cls, emoji: str) -> "ReactionType":
        return cls(emoji=ReactionTypeEmoji(emoji))

    @classmethod
    def of_custom_emoji(cls, custom_emoji_id: str) -> "ReactionType":
        return cls(custom_emoji=ReactionTypeCustomEmoji(custom_emoji_id))

    def type(self) -> str:
        if self.emoji is not None:
            return "emoji"
        if self.custom_emoji is not None:
            return "custom_emoji"
        return "unknown"

    def to_dict(self) -> dict[str, str]:
        if self.emoji is not None:
            return {"type": "emoji", "emoji": self.emoji.emoji}
        if self.custom_emoji is not None:
            return {
                "type": "custom_emoji",
                "custom_emoji_id": self.custom_emoji.custom_emoji_id,
            }
        raise ValueError("unknown ReactionType type")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReactionType":
        if not isinstance(data, Mapping):
            raise TypeError("ReactionType must be a JSON object")
        kind = data.get("type", "")
        if not isinstance(kind, str):
            raise TypeError("ReactionType field 'type' must be a string")
        if kind == "emoji":
            return cls.of_emoji(_string_field(data, "emoji"))
        if kind == "custom_emoji":
            return cls.of_custom_emoji(_string_field(data, "custom_emoji_id"))
        raise ValueError(f"unknown ReactionType type: {kind}")

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str | bytes) -> "ReactionType":
        return cls.from_dict(json.loads(text))


EMOJI_THUMBS_UP = ReactionType.of_emoji("👍")
EMOJI_THUMBS_DOWN = ReactionType.of_emoji("👎")
EMOJI_RED_HEART = ReactionType.of_emoji("\u2764")
EMOJI_FIRE = ReactionType.of_emoji("🔥")
EMOJI_SMILING_FACE_WITH_HEARTS = ReactionType.of_emoji("🥰")
EMOJI_CLAPPING_HANDS = ReactionType.of_emoji("👏")
EMOJI_BEAMING_FACE_WITH_SMILING_EYES = ReactionType.of_emoji("😁")
EMOJI_THINKING_FACE = ReactionType.of_emoji("🤔")
EMOJI_EXPLODING_HEAD = ReactionType.of_emoji("🤯")
EMOJI_FACE_SCREAMING_IN_FEAR = ReactionType.of_emoji("😱")
EMOJI_FACE_WITH_SYMBOLS_ON_MOUTH = ReactionType.of_emoji("🤬")
EMOJI_CRYING_FACE = ReactionType.of_emoji("😢")
EMOJI_PARTY_POPPER = ReactionType.of_emoji("🎉")
EMOJI_STAR_STRUCK = ReactionType.of_emoji("🤩")
EMOJI_FACE_VOMITING = ReactionType.of_emoji("🤮")
EMOJI_PILE_OF_POO = ReactionType.of_emoji("💩")
EMOJI_FOLDED_HANDS = ReactionType.of_emoji("🙏")
EMOJI_OK_HAND = ReactionType.of_emoji("👌")
EMOJI_DOVE = ReactionType.of_emoji("\U0001f54a")
EMOJI_CLOWN_FACE = ReactionType.of_emoji("🤡")
EMOJI_YAWNING_FACE = ReactionType.of_emoji("🥱")
EMOJI_WOOZY_FACE = ReactionType.of_emoji("🥴")
EMOJI_SMILING_FACE_WITH_HEART_EYES = ReactionType.of_emoji("😍")
EMOJI_SPOUTING_WHALE = ReactionType.of_emoji("🐳")
EMOJI_HEART_ON_FIRE = ReactionType.of_emoji("\u2764\u200d\U0001f525")
EMOJI_NEW_MOON_FACE = ReactionType.of_emoji("🌚")
EMOJI_HOT_DOG = ReactionType.of_emoji("🌭")
EMOJI_HUNDRED_POINTS = ReactionType.of_emoji("💯")
EMOJI_ROLLING_ON_THE_FLOOR_LAUGHING = ReactionType.of_emoji("🤣")
EMOJI_HIGH_VOLTAGE = ReactionType.of_emoji("⚡")
EMOJI_BANANA = ReactionType.of_emoji("🍌")
EMOJI_TROPHY = ReactionType.of_emoji("🏆")
EMOJI_BROKEN_HEART = ReactionType.of_emoji("💔")
EMOJI_FACE_WITH_RAISED_EYEBROW = ReactionType.of_emoji("🤨")
EMOJI_NEUTRAL_FACE = ReactionType.of_emoji("😐")
EMOJI_STRAWBERRY = ReactionType.of_emoji("🍓")
EMOJI_BOTTLE_WITH_POPPING_CORK = ReactionType.of_emoji("🍾")
EMOJI_KISS_MARK = ReactionType.of_emoji("💋")
EMOJI_MIDDLE_FINGER = ReactionType.of_emoji("🖕")
EMOJI_SMILING_FACE_WITH_HORNS = ReactionType.of_emoji("😈")
EMOJI_SLEEPING_FACE = ReactionType.of_emoji("😴")
EMOJI_LOUDLY_CRYING_FACE = ReactionType.of_emoji("😭")
EMOJI_NERD_FACE = ReactionType.of_emoji("🤓")
EMOJI_GHOST = ReactionType.of_emoji("👻")
EMOJI_MAN_TECHNOLOGIST = ReactionType.of_emoji("\U0001f468\u200d\U0001f4bb")
EMOJI_EYES = ReactionType.of_emoji("👀")
EMOJI_JACK_O_LANTERN = ReactionType.of_emoji("🎃")
EMOJI_SEE_NO_EVIL_MONKEY = ReactionType.of_emoji("🙈")
EMOJI_SMILING_FACE_WITH_HALO = ReactionType.of_emoji("😇")
EMOJI_FEARFUL_FACE = ReactionType.of_emoji("😨")
EMOJI_HANDSHAKE = ReactionType.of_emoji("🤝")
EMOJI_WRITING_HAND = ReactionType.of_emoji("\u270d")
EMOJI_SMILING_FACE_WITH_OPEN_HANDS = ReactionType.of_emoji("🤗")
EMOJI_SALUTING_FACE = ReactionType.of_emoji("🫡")
EMOJI_SANTA_CLAUS = ReactionType.of_emoji("🎅")
EMOJI_CHRISTMAS_TREE = ReactionType.of_emoji("🎄")
EMOJI_SNOWMAN = ReactionType.of_emoji("\u2603")
EMOJI_NAIL_POLISH = ReactionType.of_emoji("💅")
EMOJI_ZANY_FACE = ReactionType.of_emoji("🤪")
EMOJI_MOAI = ReactionType.of_emoji("🗿")
EMOJI_COOL_BUTTON = ReactionType.of_emoji("🆒")
EMOJI_HEART_WITH_ARROW = ReactionType.of_emoji("💘")
EMOJI_HEAR_NO_EVIL_MONKEY = ReactionType.of_emoji("🙉")
EMOJI_UNICORN = ReactionType.of_emoji("🦄")
EMOJI_FACE_BLOWING_A_KISS = ReactionType.of_emoji("😘")
EMOJI_PILL = ReactionType.of_emoji("💊")
EMOJI_SPEAK_NO_EVIL_MONKEY = ReactionType.of_emoji("🙊")
EMOJI_SMILING_FACE_WITH_SUNGLASSES = ReactionType.of_emoji("😎")
EMOJI_ALIEN_MONSTER = ReactionType.of_emoji("👾")
EMOJI_MAN_SHRUGGING = ReactionType.of_emoji("\U0001f937\u200d\u2642")
EMOJI_PERSON_SHRUGGING = ReactionType.of_emoji("🤷")
EMOJI_WOMAN_SHRUGGING = ReactionType.of_emoji("\U0001f937\u200d\u2640")
EMOJI_ENRAGED_FACE = ReactionType.of_emoji("😡")

# Every emoji reaction a bot may set.
EMOJI_ALL: tuple[ReactionType, ...] = (
    EMOJI_THUMBS_UP,
    EMOJI_THUMBS_DOWN,
    EMOJI_RED_HEART,
    EMOJI_FIRE,
    EMOJI_SMILING_FACE_WITH_HEARTS,
    EMOJI_CLAPPING_HANDS,
    EMOJI_BEAMING_FACE_WITH_SMILING_EYES,
    EMOJI_THINKING_FACE,
    EMOJI_EXPLODING_HEAD,
    EMOJI_FACE_SCREAMING_IN_FEAR,
    EMOJI_FACE_WITH_SYMBOLS_ON_MOUTH,
    EMOJI_CRYING_FACE,
    EMOJI_PARTY_POPPER,
    EMOJI_STAR_STRUCK,
    EMOJI_FACE_VOMITING,
    EMOJI_PILE_OF_POO,
    EMOJI_FOLDED_HANDS,
    EMOJI_OK_HAND,
    EMOJI_DOVE,
    EMOJI_CLOWN_FACE,
    EMOJI_YAWNING_FACE,
    EMOJI_WOOZY_FACE,
    EMOJI_SMILING_FACE_WITH_HEART_EYES,
    EMOJI_SPOUTING_WHALE,
    EMOJI_HEART_ON_FIRE,
    EMOJI_NEW_MOON_FACE,
    EMOJI_HOT_DOG,
    EMOJI_HUNDRED_POINTS,
    EMOJI_ROLLING_ON_THE_FLOOR_LAUGHING,
    EMOJI_HIGH_VOLTAGE,
    EMOJI_BANANA,
    EMOJI_TROPHY,
    EMOJI_BROKEN_HEART,
    EMOJI_FACE_WITH_RAISED_EYEBROW,
    EMOJI_NEUTRAL_FACE,
    EMOJI_STRAWBERRY,
    EMOJI_BOTTLE_WITH_POPPING_CORK,
    EMOJI_KISS_MARK,
    EMOJI_MIDDLE_FINGER,
    EMOJI_SMILING_FACE_WITH_HORNS,
    EMOJI_SLEEPING_FACE,
    EMOJI_LOUDLY_CRYING_FACE,
    EMOJI_NERD_FACE,
    EMOJI_GHOST,
    EMOJI_MAN_TECHNOLOGIST,
    EMOJI_EYES,
    EMOJI_JACK_O_LANTERN,
    EMOJI_SEE_NO_EVIL_MONKEY,
    EMOJI_SMILING_FACE_WITH_HALO,
    EMOJI_FEARFUL_FACE,
    EMOJI_HANDSHAKE,
    EMOJI_WRITING_HAND,
    EMOJI_SMILING_FACE_WITH_OPEN_HANDS,
    EMOJI_SALUTING_FACE,
    EMOJI_SANTA_CLAUS,
    EMOJI_CHRISTMAS_TREE,
    EMOJI_SNOWMAN,
    EMOJI_NAIL_POLISH,
    EMOJI_ZANY_FACE,
    EMOJI_MOAI,
    EMOJI_COOL_BUTTON,
    EMOJI_HEART_WITH_ARROW,
    EMOJI_HEAR_NO_EVIL_MONKEY,
    EMOJI_UNICORN,
    EMOJI_FACE_BLOWING_A_KISS,
    EMOJI_PILL,
    EMOJI_SPEAK_NO_EVIL_MONKEY,
    EMOJI_SMILING_FACE_WITH_SUNGLASSES,
    EMOJI_ALIEN_MONSTER,
    EMOJI_MAN_SHRUGGING,
    EMOJI_PERSON_SHRUGGING,
    EMOJI_WOMAN_SHRUGGING,
    EMOJI_ENRAGED_FACE,
)