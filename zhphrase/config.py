"""Settings of the pinyin engine: options, their defaults and their limits."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields

_INT_RANGES: dict[str, tuple[int, int]] = {
    "page_size": (3, 10),
    "cloud_pinyin_index": (1, 10),
    "prediction_size": (3, 20),
    "nbest": (1, 3),
    "long_word_limit": (0, 10),
}

_DEFAULT_QUICKPHRASE_TRIGGERS = (
    "www.",
    "ftp.",
    "http:",
    "mail.",
    "bbs.",
    "forum.",
    "https:",
    "ftp:",
    "telnet:",
    "mailto:",
)


class SwitchInputMethodBehavior(enum.Enum):
    """What happens to pending input when the input method is switched."""

    CLEAR = "Clear"
    COMMIT_PREEDIT = "CommitPreedit"
    COMMIT_DEFAULT = "CommitDefault"


class ShuangpinProfile(enum.Enum):
    """Shuangpin layouts; ``CUSTOM`` reads the layout from a user file."""

    ZIRANMA = "Ziranma"
    MS = "MS"
    ZIGUANG = "Ziguang"
    ABC = "ABC"
    ZHONGWENZHIXING = "Zhongwenzhixing"
    PINYIN_JIAJIA = "PinyinJiajia"
    XIAOHE = "Xiaohe"
    CUSTOM = "Custom"


class FuzzyFlag(enum.Flag):
    """Fuzzy pinyin matching rules."""

    NONE = 0
    VE_UE = enum.auto()
    COMMON_TYPO = enum.auto()
    INNER = enum.auto()
    INNER_SHORT = enum.auto()
    PARTIAL_FINAL = enum.auto()
    PARTIAL_SP = enum.auto()
    V_U = enum.auto()
    AN_ANG = enum.auto()
    EN_ENG = enum.auto()
    IAN_IANG = enum.auto()
    IN_ING = enum.auto()
    U_OU = enum.auto()
    UAN_UANG = enum.auto()
    C_CH = enum.auto()
    F_H = enum.auto()
    L_N = enum.auto()
    S_SH = enum.auto()
    Z_ZH = enum.auto()


_FUZZY_FIELDS: dict[str, FuzzyFlag] = {
    "ue": FuzzyFlag.VE_UE,
    "common_typo": FuzzyFlag.COMMON_TYPO,
    "inner": FuzzyFlag.INNER,
    "inner_short": FuzzyFlag.INNER_SHORT,
    "partial_final": FuzzyFlag.PARTIAL_FINAL,
    "partial_sp": FuzzyFlag.PARTIAL_SP,
    "v": FuzzyFlag.V_U,
    "an": FuzzyFlag.AN_ANG,
    "en": FuzzyFlag.EN_ENG,
    "ian": FuzzyFlag.IAN_IANG,
    "in_": FuzzyFlag.IN_ING,
    "ou": FuzzyFlag.U_OU,
    "uan": FuzzyFlag.UAN_UANG,
    "c": FuzzyFlag.C_CH,
    "f": FuzzyFlag.F_H,
    "l": FuzzyFlag.L_N,
    "s": FuzzyFlag.S_SH,
    "z": FuzzyFlag.Z_ZH,
}


@dataclass
class FuzzyConfig:
    """Which fuzzy pinyin rules are switched on."""

    ue: bool = True
    common_typo: bool = True
    inner: bool = True
    inner_short: bool = True
    partial_final: bool = True
    partial_sp: bool = False
    v: bool = False
    an: bool = False
    en: bool = False
    ian: bool = False
    in_: bool = False
    ou: bool = False
    uan: bool = False
    c: bool = False
    f: bool = False
    l: bool = False  # noqa: E741
    s: bool = False
    z: bool = False

    def flags(self) -> FuzzyFlag:
        """The enabled rules combined into one flag value."""
        result = FuzzyFlag.NONE
        for name, flag in _FUZZY_FIELDS.items():
            if getattr(self, name):
                result |= flag
        return result


@dataclass
class PinyinConfig:
    """All options of the pinyin engine with their defaults."""

    shuangpin_profile: ShuangpinProfile = ShuangpinProfile.ZIRANMA
    show_shuangpin_mode: bool = True
    page_size: int = 7
    spell_enabled: bool = True
    emoji_enabled: bool = True
    chaizi_enabled: bool = True
    ext_b_enabled: bool = True
    cloud_pinyin_enabled: bool = False
    cloud_pinyin_index: int = 2
    show_preedit_in_application: bool = True
    preedit_cursor_position_at_beginning: bool = True
    show_actual_pinyin_in_preedit: bool = False
    prediction_enabled: bool = False
    prediction_size: int = 10
    switch_input_method_behavior: SwitchInputMethodBehavior = (
        SwitchInputMethodBehavior.COMMIT_PREEDIT
    )
    forget_word: tuple[str, ...] = ("Control+7",)
    prev_page: tuple[str, ...] = ("minus", "Up", "KP_Up")
    next_page: tuple[str, ...] = ("equal", "Down", "KP_Down")
    prev_candidate: tuple[str, ...] = ("Shift+Tab",)
    next_candidate: tuple[str, ...] = ("Tab",)
    second_candidate: tuple[str, ...] = ()
    third_candidate: tuple[str, ...] = ()
    use_keypad_as_selection_key: bool = False
    select_char_from_phrase: tuple[str, ...] = ("[", "]")
    use_backspace_to_unselect: bool = True
    select_by_stroke: tuple[str, ...] = ("grave",)
    nbest: int = 2
    long_word_limit: int = 4
    quickphrase_key: str = "semicolon"
    use_v_as_quickphrase: bool = True
    quickphrase_trigger: tuple[str, ...] = _DEFAULT_QUICKPHRASE_TRIGGERS
    fuzzy: FuzzyConfig = field(default_factory=FuzzyConfig)
    first_run: bool = True

    def validate(self) -> None:
        """Raise ValueError if an option holds a value outside its limits."""
        for name, (low, high) in _INT_RANGES.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if not low <= value <= high:
                raise ValueError(
                    f"{name} must be between {low} and {high}, got {value}"
                )
        if not isinstance(self.shuangpin_profile, ShuangpinProfile):
            raise ValueError(
                f"invalid shuangpin profile: {self.shuangpin_profile!r}"
            )
        if not isinstance(
            self.switch_input_method_behavior, SwitchInputMethodBehavior
        ):
            raise ValueError(
                "invalid switch input method behavior: "
                f"{self.switch_input_method_behavior!r}"
            )
        if not isinstance(self.fuzzy, FuzzyConfig):
            raise ValueError(f"invalid fuzzy settings: {self.fuzzy!r}")
        for item in fields(self):
            if item.type == "bool" and not isinstance(
                getattr(self, item.name), bool
            ):
                raise ValueError(f"{item.name} must be a boolean")

    def sub_mode(self, unique_name: str) -> str:
        """Label of the current shuangpin layout, or an empty string."""
        if (
            unique_name == "shuangpin"
            and self.show_shuangpin_mode
            and self.shuangpin_profile is not ShuangpinProfile.CUSTOM
        ):
            return self.shuangpin_profile.value
        return ""