from enum import StrEnum


class CPUModel(StrEnum):
    POWER = "Power"
    ARM = "ARM"
    X86 = "X86"


class ServerModel(StrEnum):
    TOWER_SERVER = "Tower Server"
    RACK_SERVER = "4U Rack Server"
    MAINFRAME = "Mainframe"
    HIGH_DENSITY_SERVER = "High Density Server"
    NO_OPTIONS = "No Options"
