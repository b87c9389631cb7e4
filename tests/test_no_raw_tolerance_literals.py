import pathlib
import re

FORBIDDEN = [r"\b1e-\d+\b", r"\b0\.0+1\b"]
ALLOW_FILES = {
    'tolerance.py',  # defines epsilon
}


def test_no_raw_tolerance_literals():
    root = pathlib.Path(__file__).resolve().parent.parent / 'src' / 'epsgeom'
    py_files = sorted(root.rglob('*.py'))
    assert py_files
    pattern = re.compile('|'.join(FORBIDDEN))
    offenders = []
    for f in py_files:
        if f.name in ALLOW_FILES:
            continue
        text = f.read_text(encoding='utf-8', errors='ignore')
        for m in pattern.finditer(text):
            offenders.append((str(f.relative_to(root)), m.group(0)))
    assert not offenders, "Raw tolerance literals found (use epsgeom.tolerance.epsilon):\n" + \
        '\n'.join(f"{f}: {lit}" for f, lit in offenders)
