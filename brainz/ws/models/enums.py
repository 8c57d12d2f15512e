"""Forward-compatible enumerations for values the service controls.

Architecture:
    The service adds statuses, packagings, types, scripts and languages
    without notice. Every enum decoded from a response inherits
    TolerantEnum, whose ``_missing_`` hook never fails on a string: an
    unknown value becomes an "unrecognized" pseudo-member that keeps the raw
    string as its ``value``.

Design Decisions:
    - Raw value retained: re-encoding an unrecognized member emits the exact
      string the service sent, so round trips are lossless
    - One policy for every enum: there is no per-enum opt-out
    - Exact match only: ``"official"`` is unrecognized, not OFFICIAL, so
      the raw spelling survives re-encoding

Example:
    >>> status = ReleaseStatus("Something-New")
    >>> status.is_unrecognized, status.value
    (True, 'Something-New')
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

_UNRECOGNIZED = "UNRECOGNIZED"


class TolerantEnum(str, Enum):
    """String enum with a catch-all arm for values added by the service."""

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> TolerantEnum | None:
        if not isinstance(value, str):
            return None
        pseudo = str.__new__(cls, value)
        pseudo._name_ = _UNRECOGNIZED
        pseudo._value_ = value
        return pseudo

    @classmethod
    def unrecognized(cls, raw: str) -> TolerantEnum:
        """Build the catch-all arm for ``raw`` directly."""
        return cls(raw)

    @property
    def is_unrecognized(self) -> bool:
        """True when the value is not one of the declared members."""
        return self._name_ not in type(self).__members__

    @classmethod
    def _validate(cls, value: Any) -> TolerantEnum:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"{cls.__name__} expects a string, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda member: member.value, when_used="json"
            ),
        )


class ReleaseStatus(TolerantEnum):
    """How "official" a release is."""

    OFFICIAL = "Official"
    PROMOTION = "Promotion"
    BOOTLEG = "Bootleg"
    PSEUDO_RELEASE = "Pseudo-Release"
    WITHDRAWN = "Withdrawn"
    CANCELLED = "Cancelled"


class ReleasePackaging(TolerantEnum):
    """Physical packaging that accompanies a release."""

    BOOK = "Book"
    BOX = "Box"
    CARDBOARD_PAPER_SLEEVE = "Cardboard/Paper Sleeve"
    CASSETTE_CASE = "Cassette Case"
    DIGIBOOK = "Digibook"
    DIGIPAK = "Digipak"
    DISCBOX_SLIDER = "Discbox Slider"
    FATBOX = "Fatbox"
    GATEFOLD_COVER = "Gatefold Cover"
    JEWEL_CASE = "Jewel Case"
    KEEP_CASE = "Keep Case"
    PLASTIC_SLEEVE = "Plastic Sleeve"
    SLIDEPACK = "Slidepack"
    SLIM_JEWEL_CASE = "Slim Jewel Case"
    SNAP_CASE = "Snap Case"
    SNAPPACK = "SnapPack"
    SUPER_JEWEL_BOX = "Super Jewel Box"
    OTHER = "Other"
    NONE = "None"


class ReleaseQuality(TolerantEnum):
    """Data quality of a release entry (not of the music)."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    UNKNOWN = "unknown"
    NONE = "none"


class ReleaseScript(TolerantEnum):
    """ISO 15924 script of a release's track list."""

    ARAB = "Arab"
    ARMN = "Armn"
    BENG = "Beng"
    BRAI = "Brai"
    BUGI = "Bugi"
    CANS = "Cans"
    CHER = "Cher"
    COPT = "Copt"
    XSUX = "Xsux"
    CYRL = "Cyrl"
    DEVA = "Deva"
    EGYP = "Egyp"
    ETHI = "Ethi"
    GEOR = "Geor"
    GOTH = "Goth"
    GREK = "Grek"
    GUJR = "Gujr"
    GURU = "Guru"
    HANG = "Hang"
    HANI = "Hani"
    HANS = "Hans"
    HANT = "Hant"
    HEBR = "Hebr"
    HIRA = "Hira"
    HRKT = "Hrkt"
    JPAN = "Jpan"
    KNDA = "Knda"
    KANA = "Kana"
    KHMR = "Khmr"
    KORE = "Kore"
    LAOO = "Laoo"
    LATN = "Latn"
    MLYM = "Mlym"
    ZMTH = "Zmth"
    QAAA = "Qaaa"
    MYMR = "Mymr"
    ORKH = "Orkh"
    ORYA = "Orya"
    PHAG = "Phag"
    RUNR = "Runr"
    SINH = "Sinh"
    ZSYM = "Zsym"
    SYRC = "Syrc"
    TAML = "Taml"
    TELU = "Telu"
    THAI = "Thai"
    TIBT = "Tibt"
    VAII = "Vaii"


class Language(TolerantEnum):
    """ISO 639-3 language code of a release's track list."""

    ABK = "abk"
    ACE = "ace"
    ACH = "ach"
    ADA = "ada"
    ADY = "ady"
    AAR = "aar"
    AFR = "afr"
    AIN = "ain"
    AKA = "aka"
    AKK = "akk"
    SQI = "sqi"
    ALQ = "alq"
    AMH = "amh"
    ANP = "anp"
    ARA = "ara"
    ARG = "arg"
    ARP = "arp"
    PKA = "pka"
    HYE = "hye"
    RUP = "rup"
    QAA = "qaa"
    ASM = "asm"
    AST = "ast"
    ATJ = "atj"
    AVA = "ava"
    AWA = "awa"
    AYM = "aym"
    AZE = "aze"
    BVD = "bvd"
    BAN = "ban"
    BAL = "bal"
    BAM = "bam"
    BAS = "bas"
    EUS = "eus"
    BAR = "bar"
    BEJ = "bej"
    BEL = "bel"
    BEM = "bem"
    BEN = "ben"
    BHO = "bho"
    BIK = "bik"
    BIN = "bin"
    BIS = "bis"
    BOS = "bos"
    BRA = "bra"
    BRE = "bre"
    BOX = "box"
    BUG = "bug"
    BUL = "bul"
    BUA = "bua"
    MYA = "mya"
    BSK = "bsk"
    CAD = "cad"
    FRC = "frc"
    CAT = "cat"
    CEB = "ceb"
    XCE = "xce"
    RYU = "ryu"
    ESU = "esu"
    CHA = "cha"
    CHE = "che"
    CHR = "chr"
    NYA = "nya"
    ZHO = "zho"
    CHU = "chu"
    CHV = "chv"
    COP = "cop"
    COR = "cor"
    COS = "cos"
    MUS = "mus"
    CRE = "cre"
    CRH = "crh"
    HRV = "hrv"
    CES = "ces"
    DAN = "dan"
    DEL = "del"
    DIV = "div"
    DUA = "dua"
    DUM = "dum"
    NLD = "nld"
    DZO = "dzo"
    AER = "aer"
    EGY = "egy"
    ELX = "elx"
    ENM = "enm"
    ANG = "ang"
    ENG = "eng"
    MYV = "myv"
    EPO = "epo"
    EST = "est"
    EWE = "ewe"
    FAN = "fan"
    FAT = "fat"
    FAO = "fao"
    FIJ = "fij"
    FIL = "fil"
    FIN = "fin"
    FON = "fon"
    FRO = "fro"
    FRA = "fra"
    FRS = "frs"
    FRR = "frr"
    FRY = "fry"
    FUR = "fur"
    FUL = "ful"
    GLG = "glg"
    LUG = "lug"
    CAB = "cab"
    GAA = "gaa"
    GEZ = "gez"
    KAT = "kat"
    NDS = "nds"
    GMH = "gmh"
    GOH = "goh"
    GSW = "gsw"
    DEU = "deu"
    GON = "gon"
    GOT = "got"
    GRC = "grc"
    ELL = "ell"
    KAL = "kal"
    GOS = "gos"
    GCF = "gcf"
    GRN = "grn"
    GUJ = "guj"
    GUF = "guf"
    GYN = "gyn"
    HAT = "hat"
    HAU = "hau"
    HAW = "haw"
    HEB = "heb"
    HER = "her"
    HIN = "hin"
    HMO = "hmo"
    HMN = "hmn"
    HUN = "hun"
    ISL = "isl"
    IBO = "ibo"
    ILO = "ilo"
    IND = "ind"
    IZH = "izh"
    MOE = "moe"
    IKU = "iku"
    GLE = "gle"
    ITA = "ita"
    JAM = "jam"
    JPN = "jpn"
    JAV = "jav"
    TMR = "tmr"
    KBD = "kbd"
    KEA = "kea"
    KAB = "kab"
    XAL = "xal"
    KAN = "kan"
    KRC = "krc"
    KRL = "krl"
    KAS = "kas"
    KAZ = "kaz"
    KCA = "kca"
    KHA = "kha"
    KHM = "khm"
    KIK = "kik"
    KMB = "kmb"
    KIN = "kin"
    KIR = "kir"
    TLH = "tlh"
    KSH = "ksh"
    KOM = "kom"
    KON = "kon"
    KOK = "kok"
    KOR = "kor"
    XUG = "xug"
    KUR = "kur"
    LAD = "lad"
    LLD = "lld"
    LKT = "lkt"
    LAO = "lao"
    LAT = "lat"
    LAV = "lav"
    LZZ = "lzz"
    LIM = "lim"
    LIN = "lin"
    LIT = "lit"
    LIV = "liv"
    JBO = "jbo"
    LOU = "lou"
    LUB = "lub"
    LUA = "lua"
    LUO = "luo"
    LTZ = "ltz"
    LUY = "luy"
    MKD = "mkd"
    MAD = "mad"
    MLG = "mlg"
    MAL = "mal"
    MSA = "msa"
    MLT = "mlt"
    MNC = "mnc"
    CMN = "cmn"
    MDR = "mdr"
    MAN = "man"
    MNS = "mns"
    GLV = "glv"
    MRI = "mri"
    ARN = "arn"
    MAR = "mar"
    CHM = "chm"
    MWR = "mwr"
    MEN = "men"
    HNA = "hna"
    NAN = "nan"
    MVI = "mvi"
    MOH = "moh"
    MDF = "mdf"
    MON = "mon"
    LOL = "lol"
    MOS = "mos"
    MUL = "mul"
    NAU = "nau"
    NAV = "nav"
    NDE = "nde"
    NBL = "nbl"
    NDO = "ndo"
    NAP = "nap"
    NEW = "new"
    NEP = "nep"
    YRL = "yrl"
    NOG = "nog"
    ZXX = "zxx"
    NRN = "nrn"
    NON = "non"
    NOB = "nob"
    NNO = "nno"
    NOR = "nor"
    NZI = "nzi"
    OCI = "oci"
    ORI = "ori"
    ORM = "orm"
    OSA = "osa"
    PAL = "pal"
    PAP = "pap"
    FAS = "fas"
    PJT = "pjt"
    PON = "pon"
    POL = "pol"
    POR = "por"
    PRO = "pro"
    PRG = "prg"
    FUC = "fuc"
    PAN = "pan"
    PUS = "pus"
    PYU = "pyu"
    QUE = "que"
    QYA = "qya"
    RAJ = "raj"
    RAP = "rap"
    RAR = "rar"
    RCF = "rcf"
    RON = "ron"
    ROH = "roh"
    ROM = "rom"
    RUN = "run"
    RUS = "rus"
    RUE = "rue"
    SMN = "smn"
    SMJ = "smj"
    SME = "sme"
    SMS = "sms"
    SMA = "sma"
    SMO = "smo"
    SAG = "sag"
    SAN = "san"
    SAT = "sat"
    SRD = "srd"
    SCO = "sco"
    GLA = "gla"
    GUL = "gul"
    SRP = "srp"
    SRR = "srr"
    SHN = "shn"
    SNA = "sna"
    SCN = "scn"
    SJN = "sjn"
    SND = "snd"
    SIN = "sin"
    SLK = "slk"
    SLV = "slv"
    SOM = "som"
    SNK = "snk"
    HSB = "hsb"
    NSO = "nso"
    SOT = "sot"
    ALT = "alt"
    SPA = "spa"
    SRN = "srn"
    SUN = "sun"
    SUS = "sus"
    SVA = "sva"
    SWA = "swa"
    SSW = "ssw"
    SWE = "swe"
    SYR = "syr"
    TGL = "tgl"
    TAH = "tah"
    TGK = "tgk"
    TMH = "tmh"
    TAM = "tam"
    TAT = "tat"
    TEL = "tel"
    TET = "tet"
    THA = "tha"
    BOD = "bod"
    TIR = "tir"
    TKL = "tkl"
    TOK = "tok"
    TPI = "tpi"
    TON = "ton"
    TSO = "tso"
    TSN = "tsn"
    OTA = "ota"
    TUR = "tur"
    TUK = "tuk"
    TVL = "tvl"
    TYV = "tyv"
    TWI = "twi"
    UDM = "udm"
    UIG = "uig"
    UKR = "ukr"
    UMB = "umb"
    SJU = "sju"
    URD = "urd"
    UZB = "uzb"
    VAI = "vai"
    VEN = "ven"
    VEP = "vep"
    VIE = "vie"
    VRO = "vro"
    VOT = "vot"
    WLN = "wln"
    WAE = "wae"
    WBP = "wbp"
    WAS = "was"
    CYM = "cym"
    ARE = "are"
    WAL = "wal"
    WOL = "wol"
    WYA = "wya"
    XHO = "xho"
    RYS = "rys"
    SAH = "sah"
    YID = "yid"
    YOX = "yox"
    YOR = "yor"
    YUA = "yua"
    YUE = "yue"
    ZAP = "zap"
    DJE = "dje"
    ZZA = "zza"
    ZUL = "zul"
    ZUN = "zun"


class ArtistType(TolerantEnum):
    PERSON = "Person"
    GROUP = "Group"
    ORCHESTRA = "Orchestra"
    CHOIR = "Choir"
    CHARACTER = "Character"
    OTHER = "Other"


class Gender(TolerantEnum):
    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "Non-binary"
    OTHER = "Other"
    NOT_APPLICABLE = "Not applicable"


class AreaType(TolerantEnum):
    COUNTRY = "Country"
    SUBDIVISION = "Subdivision"
    COUNTY = "County"
    MUNICIPALITY = "Municipality"
    CITY = "City"
    DISTRICT = "District"
    ISLAND = "Island"


class LabelType(TolerantEnum):
    IMPRINT = "Imprint"
    ORIGINAL_PRODUCTION = "Original Production"
    BOOTLEG_PRODUCTION = "Bootleg Production"
    REISSUE_PRODUCTION = "Reissue Production"
    DISTRIBUTOR = "Distributor"
    HOLDING = "Holding"
    RIGHTS_SOCIETY = "Rights Society"
    PUBLISHER = "Publisher"
    MANUFACTURER = "Manufacturer"


class EventType(TolerantEnum):
    CONCERT = "Concert"
    FESTIVAL = "Festival"
    STAGE_PERFORMANCE = "Stage performance"
    AWARD_CEREMONY = "Award ceremony"
    LAUNCH_EVENT = "Launch event"
    CONVENTION_EXPO = "Convention/Expo"
    MASTERCLASS_CLINIC = "Masterclass/Clinic"


class PlaceType(TolerantEnum):
    STUDIO = "Studio"
    VENUE = "Venue"
    STADIUM = "Stadium"
    INDOOR_ARENA = "Indoor arena"
    RELIGIOUS_BUILDING = "Religious building"
    EDUCATIONAL_INSTITUTION = "Educational institution"
    PRESSING_PLANT = "Pressing plant"
    OTHER = "Other"


class InstrumentType(TolerantEnum):
    WIND = "Wind instrument"
    STRING = "String instrument"
    PERCUSSION = "Percussion instrument"
    ELECTRONIC = "Electronic instrument"
    ENSEMBLE = "Ensemble"
    FAMILY = "Family"
    OTHER = "Other instrument"


class SeriesType(TolerantEnum):
    RELEASE_GROUP_SERIES = "Release group series"
    RELEASE_SERIES = "Release series"
    RECORDING_SERIES = "Recording series"
    WORK_SERIES = "Work series"
    CATALOGUE = "Catalogue"
    EVENT_SERIES = "Event series"
    TOUR = "Tour"
    FESTIVAL = "Festival"
    RUN = "Run"
    RESIDENCY = "Residency"
    AWARD_CEREMONY = "Award ceremony"
    PODCAST = "Podcast"


class WorkType(TolerantEnum):
    ARIA = "Aria"
    BALLET = "Ballet"
    CANTATA = "Cantata"
    CONCERTO = "Concerto"
    MUSICAL = "Musical"
    OPERA = "Opera"
    POEM = "Poem"
    SONATA = "Sonata"
    SONG = "Song"
    SONG_CYCLE = "Song-cycle"
    SOUNDTRACK = "Soundtrack"
    SUITE = "Suite"
    SYMPHONY = "Symphony"


class ReleaseGroupPrimaryType(TolerantEnum):
    ALBUM = "Album"
    SINGLE = "Single"
    EP = "EP"
    BROADCAST = "Broadcast"
    OTHER = "Other"


class ReleaseGroupSecondaryType(TolerantEnum):
    COMPILATION = "Compilation"
    SOUNDTRACK = "Soundtrack"
    SPOKENWORD = "Spokenword"
    INTERVIEW = "Interview"
    AUDIOBOOK = "Audiobook"
    AUDIO_DRAMA = "Audio drama"
    LIVE = "Live"
    REMIX = "Remix"
    DJ_MIX = "DJ-mix"
    MIXTAPE_STREET = "Mixtape/Street"
    DEMO = "Demo"
    FIELD_RECORDING = "Field recording"


class Direction(TolerantEnum):
    """Which end of a relationship the enclosing entity sits on."""

    FORWARD = "forward"
    BACKWARD = "backward"
