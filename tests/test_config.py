import pytest

from zhphrase.config import (
    FuzzyConfig,
    FuzzyFlag,
    PinyinConfig,
    ShuangpinProfile,
    SwitchInputMethodBehavior,
)


def test_default_fuzzy_flags():
    expected = (
        FuzzyFlag.VE_UE
        | FuzzyFlag.COMMON_TYPO
        | FuzzyFlag.INNER
        | FuzzyFlag.INNER_SHORT
        | FuzzyFlag.PARTIAL_FINAL
    )
    assert FuzzyConfig().flags() == expected


def test_all_fuzzy_disabled_gives_no_flags():
    config = FuzzyConfig(
        ue=False,
        common_typo=False,
        inner=False,
        inner_short=False,
        partial_final=False,
    )
    assert config.flags() == FuzzyFlag.NONE


@pytest.mark.parametrize(
    "name, flag",
    [
        ("partial_sp", FuzzyFlag.PARTIAL_SP),
        ("v", FuzzyFlag.V_U),
        ("an", FuzzyFlag.AN_ANG),
        ("en", FuzzyFlag.EN_ENG),
        ("ian", FuzzyFlag.IAN_IANG),
        ("in_", FuzzyFlag.IN_ING),
        ("ou", FuzzyFlag.U_OU),
        ("uan", FuzzyFlag.UAN_UANG),
        ("c", FuzzyFlag.C_CH),
        ("f", FuzzyFlag.F_H),
        ("l", FuzzyFlag.L_N),
        ("s", FuzzyFlag.S_SH),
        ("z", FuzzyFlag.Z_ZH),
    ],
)
def test_each_optional_fuzzy_field_adds_its_flag(name, flag):
    base = FuzzyConfig().flags()
    config = FuzzyConfig(**{name: True})
    assert config.flags() == base | flag
    assert flag not in base


def test_pinyin_config_defaults():
    config = PinyinConfig()
    assert config.page_size == 7
    assert config.cloud_pinyin_index == 2
    assert config.prediction_size == 10
    assert config.nbest == 2
    assert config.long_word_limit == 4
    assert config.shuangpin_profile is ShuangpinProfile.ZIRANMA
    assert (
        config.switch_input_method_behavior
        is SwitchInputMethodBehavior.COMMIT_PREEDIT
    )
    assert config.quickphrase_trigger[0] == "www."
    assert "mailto:" in config.quickphrase_trigger
    assert config.prediction_enabled is False


def test_default_config_is_valid():
    config = PinyinConfig()
    config.validate()
    assert config.page_size == 7


def test_fuzzy_default_is_per_instance():
    first = PinyinConfig()
    second = PinyinConfig()
    first.fuzzy.z = True
    assert FuzzyFlag.Z_ZH not in second.fuzzy.flags()


@pytest.mark.parametrize(
    "name, value",
    [
        ("page_size", 2),
        ("page_size", 11),
        ("cloud_pinyin_index", 0),
        ("cloud_pinyin_index", 11),
        ("prediction_size", 2),
        ("prediction_size", 21),
        ("nbest", 0),
        ("nbest", 4),
        ("long_word_limit", -1),
        ("long_word_limit", 11),
    ],
)
def test_validate_rejects_out_of_range(name, value):
    config = PinyinConfig(**{name: value})
    with pytest.raises(ValueError):
        config.validate()


@pytest.mark.parametrize(
    "name, value",
    [
        ("page_size", 3),
        ("page_size", 10),
        ("nbest", 1),
        ("nbest", 3),
        ("long_word_limit", 0),
        ("prediction_size", 20),
    ],
)
def test_validate_accepts_limits(name, value):
    config = PinyinConfig(**{name: value})
    config.validate()
    assert getattr(config, name) == value


def test_validate_rejects_wrong_enum():
    config = PinyinConfig(shuangpin_profile="Ziranma")
    with pytest.raises(ValueError):
        config.validate()


def test_validate_rejects_bool_as_int():
    config = PinyinConfig(nbest=True)
    with pytest.raises(ValueError):
        config.validate()


def test_sub_mode_shows_profile_for_shuangpin():
    config = PinyinConfig(shuangpin_profile=ShuangpinProfile.XIAOHE)
    assert config.sub_mode("shuangpin") == "Xiaohe"


def test_sub_mode_empty_for_pinyin():
    assert PinyinConfig().sub_mode("pinyin") == ""


def test_sub_mode_empty_for_custom_profile():
    config = PinyinConfig(shuangpin_profile=ShuangpinProfile.CUSTOM)
    assert config.sub_mode("shuangpin") == ""


def test_sub_mode_empty_when_hidden():
    config = PinyinConfig(show_shuangpin_mode=False)
    assert config.sub_mode("shuangpin") == ""


def test_enum_values_match_config_names():
    assert ShuangpinProfile("PinyinJiajia") is ShuangpinProfile.PINYIN_JIAJIA
    assert (
        SwitchInputMethodBehavior("CommitDefault")
        is SwitchInputMethodBehavior.COMMIT_DEFAULT
    )