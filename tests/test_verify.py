from scalelab.core.scale import ScaleOptions, generate_color_scale
from scalelab.logic.verify.engine import audit_scale

STEPS = [0, 100, 200, 300, 400, 500, 600, 700, 800, 900, 1000]


def gray_scale():
    return generate_color_scale(ScaleOptions(0, 0, 0, STEPS))


def test_audit_covers_every_pair():
    law_checks, aa_checks = audit_scale(gray_scale())
    assert len(law_checks) == len(STEPS) * (len(STEPS) - 1) // 2
    assert {(check.low, check.high) for check in aa_checks} == {
        (a, b) for a in STEPS for b in STEPS if b - a >= 500
    }


def test_gray_scale_passes_audit():
    law_checks, aa_checks = audit_scale(gray_scale())
    assert all(check.passed for check in law_checks)
    assert all(check.passed for check in aa_checks)


def test_audit_flags_contrast_outside_margin():
    scale = {0: (255.0, 255.0, 255.0), 500: (250.0, 250.0, 250.0)}
    law_checks, aa_checks = audit_scale(scale, margin=0.5)
    assert [check.passed for check in law_checks] == [False]
    assert [check.passed for check in aa_checks] == [False]
    assert law_checks[0].reference == 0 and law_checks[0].step == 500
