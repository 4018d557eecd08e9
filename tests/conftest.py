"""
Fake pyelftools objects, so symbol table handling can be tested
without building real ELF files
"""

import pytest

from lib_ghc_symbol_tools import elf_symbols as lib_elf_symbols


class FakeSymbol:
    def __init__(self, name, value, size, st_type):
        self.name = name
        self._fields = {
            'st_value': value,
            'st_size': size,
            'st_info': {'type': st_type},
        }

    def __getitem__(self, key):
        return self._fields[key]


class FakeSection:
    def __init__(self, name):
        self.name = name


class FakeSymbolTableSection(FakeSection):
    def __init__(self, name, symbols):
        super().__init__(name)
        self.symbols = symbols

    def iter_symbols(self):
        return iter(self.symbols)


class FakeELFFile:
    def __init__(self, sections):
        self.sections = sections

    def iter_sections(self):
        return iter(self.sections)


@pytest.fixture
def fake_elf(monkeypatch):
    monkeypatch.setattr(lib_elf_symbols, 'SymbolTableSection', FakeSymbolTableSection)
    return FakeELFFile([
        FakeSection('.text'),
        FakeSymbolTableSection('.symtab', [
            FakeSymbol('', 0, 0, 'STT_NOTYPE'),
            FakeSymbol('base_GHCziBase_zpzp_info', 0x409a38, 0x20, 'STT_FUNC'),
            FakeSymbol('ghczmprim_GHCziTypes_ZC_closure', 0x4c1000, 0x10, 'STT_OBJECT'),
            FakeSymbol('hs_main.c', 0, 0, 'STT_FILE'),
        ]),
        FakeSymbolTableSection('.dynsym', [
            FakeSymbol('stg_upd_frame_zj_info', 0x401000, 0, 'STT_FUNC'),
        ]),
    ])
