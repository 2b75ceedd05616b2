from enum import Enum

MEAL = "meal"
CALENDAR = "calendar"

# portal pages, same on every regional host
MEAL_URL = "sts_sci_md00_001.do"
CALENDAR_URL = "sts_sci_sf01_001.do"

KIND_URLS = {
    MEAL: MEAL_URL,
    CALENDAR: CALENDAR_URL,
}

REQUEST_TIMEOUT = 30
REQUEST_HEADERS = {"user-agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/99.0.4844.82 Safari/537.36"}


class Type(Enum):
    """Institution type, valued with the portal's schulCrseScCode."""

    KINDERGARTEN = "1"  # kindergarten attached to an elementary school
    ELEMENTARY = "2"
    MIDDLE = "3"
    HIGH = "4"


class Region(Enum):
    """Regional office of education, valued with its portal host."""

    SEOUL = "stu.sen.go.kr"
    INCHEON = "stu.ice.go.kr"
    BUSAN = "stu.pen.go.kr"
    GWANGJU = "stu.gen.go.kr"
    DAEJEON = "stu.dje.go.kr"
    DAEGU = "stu.dge.go.kr"
    SEJONG = "stu.sje.go.kr"
    ULSAN = "stu.use.go.kr"
    GYEONGGI = "stu.goe.go.kr"
    KANGWON = "stu.kwe.go.kr"
    CHUNGBUK = "stu.cbe.go.kr"
    CHUNGNAM = "stu.cne.go.kr"
    GYEONGBUK = "stu.gbe.go.kr"
    GYEONGNAM = "stu.gne.go.kr"
    JEONBUK = "stu.jbe.go.kr"
    JEONNAM = "stu.jne.go.kr"
    JEJU = "stu.jje.go.kr"
