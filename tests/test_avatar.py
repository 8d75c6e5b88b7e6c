import dataclasses

import pytest

from avatar import AvatarResult, WcagLevel, classify_wcag, resolve, resolve_many
from config import AvatarConfig, ColorBasis, PaletteMode
from services.color_service import hex_to_rgb

NAMES = [
    'Ludwig van Beethoven',
    'Madonna',
    'Emma de Vries',
    'Noah Jansen',
    'Yuki Tanaka',
    'Aisha van der Linden',
    '\U0001F600 Smile',
    '',
]


def test_resolve_default_config():
    result = resolve('Ludwig van Beethoven')

    assert result == AvatarResult(
        source_name='Ludwig van Beethoven',
        initials='LB',
        hue=292,
        saturation=65,
        lightness=45,
        rgb=(169, 40, 189),
        hex='#a928bd',
        text_color='#ffffff',
        contrast_ratio=result.contrast_ratio,
        wcag_level=WcagLevel.AA_PASS,
    )
    assert result.contrast_ratio == pytest.approx(5.6371, abs=1e-4)
    assert result.hsl == 'hsl(292, 65%, 45%)'


def test_resolve_black_text_on_light_background():
    result = resolve('Madonna')

    assert result.initials == 'M'
    assert result.hue == 139
    assert result.hex == '#28bd57'
    assert result.text_color == '#000000'
    assert result.wcag_level is WcagLevel.AAA_PASS


def test_resolve_force_aaa_adjusts_lightness():
    result = resolve('Ludwig van Beethoven', AvatarConfig(force_aaa=True))

    assert result.lightness == 38
    assert result.hex == '#8f22a0'
    assert result.contrast_ratio >= 7.0
    assert result.wcag_level is WcagLevel.AAA_PASS


def test_resolve_relabels_aa_when_aaa_is_requested():
    result = resolve('Ludwig van Beethoven', AvatarConfig(min_contrast_ratio=7.0))
    assert result.wcag_level is WcagLevel.AA_PASS_AAA_FAIL


def test_resolve_blank_name():
    result = resolve('   ')

    assert result.initials == '?'
    assert result.source_name == ''
    assert result.hue == 125


def test_resolve_trims_source_name():
    assert resolve('  Madonna ').source_name == 'Madonna'


def test_resolve_full_name_basis():
    config = AvatarConfig(color_basis=ColorBasis.FULL_NAME)

    assert resolve('Ludwig van Beethoven', config).hue == 115
    assert resolve('  LUDWIG van beethoven ', config).hue == 115


def test_resolve_limited_palette():
    assert resolve('Ludwig van Beethoven', AvatarConfig(palette_mode=PaletteMode.LIMITED_12)).hue == 120


@pytest.mark.parametrize('name', NAMES)
@pytest.mark.parametrize('palette', list(PaletteMode))
@pytest.mark.parametrize('basis', list(ColorBasis))
def test_resolve_invariants(name, palette, basis):
    config = AvatarConfig(color_basis=basis, palette_mode=palette)
    result = resolve(name, config)

    assert 0 <= result.hue < 360
    if palette is PaletteMode.LIMITED_12:
        assert result.hue % 30 == 0
    assert result.initials
    assert len(result.hex) == 7
    assert result.hex == result.hex.lower()
    assert hex_to_rgb(result.hex) == result.rgb
    assert result.text_color in ('#ffffff', '#000000')
    assert result.contrast_ratio >= 1.0
    assert resolve(name, config) == result


@pytest.mark.parametrize('name', NAMES)
@pytest.mark.parametrize('saturation, lightness', [(65, 45), (100, 50), (100, 70), (30, 60), (90, 30)])
def test_force_aaa_never_reports_aaa_below_seven(name, saturation, lightness):
    config = AvatarConfig(saturation=saturation, lightness=lightness, force_aaa=True)
    result = resolve(name, config)

    if result.wcag_level is WcagLevel.AAA_PASS:
        assert result.contrast_ratio >= 7.0
    if result.contrast_ratio < 7.0:
        assert result.lightness == lightness


def test_resolve_result_is_immutable():
    result = resolve('Madonna')
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.hue = 0


def test_resolve_many_preserves_order():
    results = resolve_many(NAMES)

    assert [result.source_name for result in results] == [name.strip() for name in NAMES]
    assert results == tuple(resolve(name) for name in NAMES)


def test_to_dict_uses_export_keys():
    record = resolve('Ludwig van Beethoven').to_dict()

    assert record == {
        'name': 'Ludwig van Beethoven',
        'initials': 'LB',
        'background': '#a928bd',
        'text-color': '#ffffff',
        'hsl': 'hsl(292, 65%, 45%)',
        'contrast-ratio': 5.64,
        'wcag': 'AA Pass',
    }


@pytest.mark.parametrize(
    'ratio, nominal, expected',
    [
        (21.0, 4.5, WcagLevel.AAA_PASS),
        (7.0, 4.5, WcagLevel.AAA_PASS),
        (7.0, 7.0, WcagLevel.AAA_PASS),
        (6.99, 4.5, WcagLevel.AA_PASS),
        (4.5, 4.5, WcagLevel.AA_PASS),
        (4.5, 7.0, WcagLevel.AA_PASS_AAA_FAIL),
        (4.49, 7.0, WcagLevel.FAIL_BELOW_4_5),
        (3.0, 4.5, WcagLevel.FAIL_BELOW_4_5),
        (2.99, 4.5, WcagLevel.FAIL_BELOW_3),
        (1.0, 4.5, WcagLevel.FAIL_BELOW_3),
    ],
)
def test_classify_wcag(ratio, nominal, expected):
    assert classify_wcag(ratio, nominal) is expected


def test_wcag_labels():
    assert [level.label for level in WcagLevel] == [
        'AAA Pass',
        'AA Pass',
        'AA Pass (AAA Fail)',
        'AA Fail',
        'Fail',
    ]
