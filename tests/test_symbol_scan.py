from lib_ghc_symbol_tools import common
from lib_ghc_symbol_tools import symbol_scan as lib_symbol_scan


SILENT = common.DemangleFailureHandling(common.ErrorVolume.SILENT)

DISASSEMBLY = """\
0000000000409a38 <base_GHCziBase_zpzp_info>:
  409a38:	jmp    409b10 <ghczmprim_GHCziTypes_ZC_con_info>
  409a3d:	lea    0x28(%rip),%rbx        # <Main_zdwgo_closure>
"""

DEMANGLED_DISASSEMBLY = """\
0000000000409a38 <base_GHC.Base_++_info>:
  409a38:	jmp    409b10 <ghc-prim_GHC.Types_:_con_info>
  409a3d:	lea    0x28(%rip),%rbx        # <Main_$wgo_closure>
"""


def test_find_symbols():
    found = [m.group(0) for m in lib_symbol_scan.find_symbols(DISASSEMBLY)]
    assert found == [
        'base_GHCziBase_zpzp_info',
        'ghczmprim_GHCziTypes_ZC_con_info',
        'Main_zdwgo_closure',
    ]


def test_demangle_disassembly():
    assert lib_symbol_scan.demangle_symbols_in_text(DISASSEMBLY, SILENT) == DEMANGLED_DISASSEMBLY


def test_prose_is_left_alone():
    text = 'Zoning rules: the size of the heap was 5MB (info: lazy).\n'
    assert list(lib_symbol_scan.find_symbols(text)) == []
    assert lib_symbol_scan.demangle_symbols_in_text(text, SILENT) == text


def test_repeated_symbol():
    text = 'base_GHCziList_zzip_info base_GHCziList_zzip_info'
    assert lib_symbol_scan.demangle_symbols_in_text(text, SILENT) == \
        'base_GHC.List_zip_info base_GHC.List_zip_info'


def test_undecodable_symbol_is_kept(capsys):
    text = 'call foo_zjbar_baz_info\n'
    assert lib_symbol_scan.demangle_symbols_in_text(text) == text
    assert 'foo_zjbar_baz_info' in capsys.readouterr().err


def test_undecodable_symbol_is_dropped():
    handling = common.DemangleFailureHandling(
        common.ErrorVolume.SILENT,
        common.DemangleFailureHandling.Behavior.DROP)
    text = 'call foo_zjbar_baz_info\n'
    assert lib_symbol_scan.demangle_symbols_in_text(text, handling) == 'call \n'


def test_symbols_at_both_ends():
    text = 'Main_zdwgo_info calls base_GHCziBase_zpzp_info'
    assert lib_symbol_scan.demangle_symbols_in_text(text, SILENT) == \
        'Main_$wgo_info calls base_GHC.Base_++_info'


def test_rewrite_uses_find_symbols(monkeypatch):
    monkeypatch.setattr(lib_symbol_scan, 'find_symbols', lambda text: iter([]))
    assert lib_symbol_scan.demangle_symbols_in_text(DISASSEMBLY, SILENT) == DISASSEMBLY
