import dataclasses
from typing import Iterator, Optional, Union

from elftools.elf.elffile import ELFFile  # pip install pyelftools
from elftools.elf.sections import SymbolTableSection

from . import common
from . import demangle as lib_demangle


SYMBOL_KINDS = {
    'STT_FUNC': 'code',
    'STT_OBJECT': 'data',
}


@dataclasses.dataclass
class DemangledSymbol:
    """
    One named entry from an ELF symbol table
    """
    address: int
    size: int
    kind: str
    raw_name: str
    demangled_name: Optional[str]

    def __str__(self):
        return ' '.join([
            f'0x{self.address:08x}',
            f'0x{self.size:08x}',
            self.raw_name,
            self.raw_name if self.demangled_name is None else self.demangled_name,
            self.kind,
        ])


def symbol_kind(st_type: Union[str, int]) -> str:
    return SYMBOL_KINDS.get(st_type, str(st_type))


def iter_demangled_symbols(
        elf: ELFFile,
        handling: Optional[common.DemangleFailureHandling] = None) -> Iterator[DemangledSymbol]:
    """
    Yield every named symbol in every symbol table (.symtab, .dynsym)
    of the ELF file, alongside its demangled name
    """
    for section in elf.iter_sections():
        if not isinstance(section, SymbolTableSection):
            continue

        for symbol in section.iter_symbols():
            if not symbol.name:
                continue

            yield DemangledSymbol(
                symbol['st_value'],
                symbol['st_size'],
                symbol_kind(symbol['st_info']['type']),
                symbol.name,
                lib_demangle.demangle_or_keep(symbol.name, handling))
