"""Static catalog served when neither the upstream provider nor the store is available."""

from __future__ import annotations

from .models import SeedRecord

_YOUTUBE_EMBED = "https://www.youtube.com/embed/"
_IMAGE_BASE = "https://image.tmdb.org/t/p"


def _poster(path: str) -> str:
    return f"{_IMAGE_BASE}/w500{path}"


def _backdrop(path: str) -> str:
    return f"{_IMAGE_BASE}/w1280{path}"


SEED_CATALOG: tuple[SeedRecord, ...] = (
    SeedRecord(
        title="Stranger Things",
        description=(
            "When a young boy vanishes, a small town uncovers a mystery involving"
            " secret experiments and a terrifying supernatural force."
        ),
        category="Trending Now",
        type="series",
        year=2016,
        rating="U/A 16+",
        duration="4 Seasons",
        image_url=_poster("/49WJfeN0moxb9IPfGn8AIqMGskD.jpg"),
        backdrop_url=_backdrop("/56v2KjBlU4XaOv9rVYEQypROD7P.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}b9EkMc79ZSU",
        featured=True,
    ),
    SeedRecord(
        title="Inception",
        description=(
            "A thief who steals corporate secrets through dream-sharing technology"
            " is given the inverse task of planting an idea."
        ),
        category="Trending Now",
        type="movie",
        year=2010,
        rating="U/A 13+",
        duration="2h 28m",
        image_url=_poster("/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg"),
        backdrop_url=_backdrop("/s3TBrRGB1iav7gFOCNx3H31MoES.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}YoHD9XEInc0",
    ),
    SeedRecord(
        title="The Dark Knight",
        description=(
            "Batman faces the Joker, a criminal mastermind who plunges Gotham City"
            " into anarchy."
        ),
        category="Trending Now",
        type="movie",
        year=2008,
        rating="U/A 13+",
        duration="2h 32m",
        image_url=_poster("/qJ2tW6WMUDux911r6m7haRef0WH.jpg"),
        backdrop_url=_backdrop("/nMKdUUepR0i5zn0y1T4CsSB5chy.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}EXeTwQWrcwY",
    ),
    SeedRecord(
        title="Money Heist",
        description=(
            "An unusual group of robbers attempt to carry out the most perfect"
            " robbery in Spanish history."
        ),
        category="Trending Now",
        type="series",
        year=2017,
        rating="A 18+",
        duration="5 Parts",
        image_url=_poster("/reEMJA1uzscCbkpeRJeTT2bjqUp.jpg"),
        backdrop_url=_backdrop("/gFZriCkpJYsApPZEF3jhxL4yLzG.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}_InqQJRqGW4",
    ),
    SeedRecord(
        title="Interstellar",
        description=(
            "A team of explorers travel through a wormhole in space in an attempt"
            " to ensure humanity's survival."
        ),
        category="Top Picks",
        type="movie",
        year=2014,
        rating="U/A 13+",
        duration="2h 49m",
        image_url=_poster("/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg"),
        backdrop_url=_backdrop("/xJHokMbljvjADYdit5fK5VQsXEG.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}zSWdZVtXT7E",
    ),
    SeedRecord(
        title="Breaking Bad",
        description=(
            "A high school chemistry teacher turned methamphetamine manufacturer"
            " partners with a former student."
        ),
        category="Top Picks",
        type="series",
        year=2008,
        rating="A 18+",
        duration="5 Seasons",
        image_url=_poster("/ggFHVNu6YYI5L9pCfOacjizRGt.jpg"),
        backdrop_url=_backdrop("/tsRy63Mu5cu8etL1X7ZLyf7UP1M.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}HhesaQXLuRY",
    ),
    SeedRecord(
        title="The Crown",
        description=(
            "Follows the political rivalries and romance of Queen Elizabeth II's"
            " reign and the events that shaped the second half of the century."
        ),
        category="Top Picks",
        type="series",
        year=2016,
        rating="U/A 16+",
        duration="6 Seasons",
        image_url=_poster("/1M876KPjulVwppEpldhdc8V4o68.jpg"),
        backdrop_url=_backdrop("/9xnY8vBGmbkZd8xIYeVmKa6Ra5K.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}JWtnJjn6ng0",
    ),
    SeedRecord(
        title="Parasite",
        description=(
            "Greed and class discrimination threaten the newly formed symbiotic"
            " relationship between the wealthy Park family and the destitute Kim clan."
        ),
        category="Top Picks",
        type="movie",
        year=2019,
        rating="A 18+",
        duration="2h 12m",
        image_url=_poster("/7IiTTgloJzvGI1TAYymCfbfl3vT.jpg"),
        backdrop_url=_backdrop("/TU9NIjwzjoKPwQHoHshkFcQUCG.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}5xH0HfJHsaY",
    ),
    SeedRecord(
        title="Mad Max: Fury Road",
        description=(
            "In a post-apocalyptic wasteland, Max teams up with a mysterious woman"
            " to flee a tyrannical warlord."
        ),
        category="Action Thrillers",
        type="movie",
        year=2015,
        rating="A 18+",
        duration="2h 0m",
        image_url=_poster("/hA2ple9q4qnwxp3hKVNhroipsir.jpg"),
        backdrop_url=_backdrop("/phszHPFVhPHhMZgo0fWTKBDQsJA.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}hEJnMQG9ev8",
    ),
    SeedRecord(
        title="John Wick",
        description=(
            "An ex-hitman comes out of retirement to track down the gangsters that"
            " took everything from him."
        ),
        category="Action Thrillers",
        type="movie",
        year=2014,
        rating="A 18+",
        duration="1h 41m",
        image_url=_poster("/fZPSd91yGE9fCcCe6OoQr6E3Bev.jpg"),
        backdrop_url=_backdrop("/umC04Cozevu8nn3JTDJ1pc7PVTn.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}C0BMx-qxsP4",
    ),
    SeedRecord(
        title="Extraction",
        description=(
            "A black-market mercenary who has nothing to lose is hired to rescue"
            " the kidnapped son of an imprisoned international crime lord."
        ),
        category="Action Thrillers",
        type="movie",
        year=2020,
        rating="A 18+",
        duration="1h 57m",
        image_url=_poster("/nygOUcBKPHFTbxsYRFZVePqgPK6.jpg"),
        backdrop_url=_backdrop("/1R6cvRtZgsYCkh8UFuWFN33xBP4.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}L6P3nI6VnlY",
    ),
    SeedRecord(
        title="The Witcher",
        description=(
            "Geralt of Rivia, a mutated monster-hunter for hire, journeys toward"
            " his destiny in a turbulent world."
        ),
        category="Fantasy Worlds",
        type="series",
        year=2019,
        rating="A 18+",
        duration="3 Seasons",
        image_url=_poster("/7vjaCdMw15FEbXyLQTVa04URsPm.jpg"),
        backdrop_url=_backdrop("/jBJWaqoSCiARWtfV0GlqHrcdidd.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}ndl1W4ltcmg",
    ),
    SeedRecord(
        title="Dark",
        description=(
            "A family saga with a supernatural twist, set in a German town where"
            " the disappearance of two children exposes fractured relationships."
        ),
        category="Fantasy Worlds",
        type="series",
        year=2017,
        rating="A 16+",
        duration="3 Seasons",
        image_url=_poster("/apbrbWs8M9lyOpJYU5WXrpFbk1Z.jpg"),
        backdrop_url=_backdrop("/3lBDg3i6nn5R2NKFCJ6oKyUo2j5.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}rrwycJ08PSA",
    ),
    SeedRecord(
        title="Spirited Away",
        description=(
            "During her family's move to the suburbs, a sullen girl wanders into a"
            " world ruled by gods, witches, and spirits."
        ),
        category="Fantasy Worlds",
        type="movie",
        year=2001,
        rating="U",
        duration="2h 5m",
        image_url=_poster("/39wmItIWsg5sZMyRUHLkWBcuVCM.jpg"),
        backdrop_url=_backdrop("/bSXfU4dwZyBA1vMmXvejdRXBvuF.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}ByXuk9QqQkk",
    ),
    SeedRecord(
        title="The Office",
        description=(
            "A mockumentary on a group of typical office workers, where the"
            " workday consists of ego clashes and inappropriate behaviour."
        ),
        category="Comedy Picks",
        type="series",
        year=2005,
        rating="U/A 13+",
        duration="9 Seasons",
        image_url=_poster("/7DJKHzAi83BmQrWLrYYOqcoKfhR.jpg"),
        backdrop_url=_backdrop("/vNpuAxGTl9HsUbHqam3E9CzqCvX.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}LHOtME2DL4g",
    ),
    SeedRecord(
        title="The Grand Budapest Hotel",
        description=(
            "A writer encounters the owner of an aging high-class hotel, who tells"
            " him of his early years serving as a lobby boy."
        ),
        category="Comedy Picks",
        type="movie",
        year=2014,
        rating="U/A 13+",
        duration="1h 40m",
        image_url=_poster("/eWdyYQreja6JGCzqHWXpWHDrrPo.jpg"),
        backdrop_url=_backdrop("/nX5XotM9yprCKarRH4fzOq1VM1J.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}1Fg5iWmQjwk",
    ),
    SeedRecord(
        title="Brooklyn Nine-Nine",
        description=(
            "Comedy series following the exploits of Det. Jake Peralta and his"
            " diverse, lovable colleagues as they police the NYPD's 99th Precinct."
        ),
        category="Comedy Picks",
        type="series",
        year=2013,
        rating="U/A 13+",
        duration="8 Seasons",
        image_url=_poster("/hgRMSOt7a1b8qyQR68vUixJPang.jpg"),
        backdrop_url=_backdrop("/rmlOGNLbGK1P8TYqvxU9eS2Cf3d.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}sEOuJ4z5aTc",
    ),
    SeedRecord(
        title="Our Planet",
        description=(
            "Documentary series focusing on the breadth of the diversity of"
            " habitats around the world."
        ),
        category="Documentaries",
        type="series",
        year=2019,
        rating="U",
        duration="1 Season",
        image_url=_poster("/wfyfdHUNEd7g5UWjOAkR7etMNKN.jpg"),
        backdrop_url=_backdrop("/6uNw1QkDsdQwIM0sxwUTSWBDrXz.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}aETNYyrqNYE",
    ),
    SeedRecord(
        title="Free Solo",
        description=(
            "Alex Honnold attempts to become the first person to ever free solo"
            " climb El Capitan."
        ),
        category="Documentaries",
        type="movie",
        year=2018,
        rating="U/A 13+",
        duration="1h 40m",
        image_url=_poster("/v4QfYZMACODlWul9doN9RxE99ag.jpg"),
        backdrop_url=_backdrop("/8Gxv8gSFCU0XGDykEGv7zR1n2ua.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}urRVZ4SW7WU",
    ),
    SeedRecord(
        title="Squid Game",
        description=(
            "Hundreds of cash-strapped players accept a strange invitation to"
            " compete in children's games with deadly high stakes."
        ),
        category="Trending Now",
        type="series",
        year=2021,
        rating="A 18+",
        duration="2 Seasons",
        image_url=_poster("/dDlEmu3EZ0Pgg93K2SVNLCjCSvE.jpg"),
        backdrop_url=_backdrop("/qw3J9cNeLioOLoR68WX7z79aCdK.jpg"),
        trailer_url=f"{_YOUTUBE_EMBED}oqxAJKy0ii4",
    ),
)
