"""Academic disciplines a package or template is aimed at, in kebab-case."""

from enum import Enum


class Discipline(str, Enum):
    AGRICULTURE = "agriculture"
    ANTHROPOLOGY = "anthropology"
    ARCHAEOLOGY = "archaeology"
    ARCHITECTURE = "architecture"
    BIOLOGY = "biology"
    BUSINESS = "business"
    CHEMISTRY = "chemistry"
    COMMUNICATION = "communication"
    COMPUTER_SCIENCE = "computer-science"
    DESIGN = "design"
    DRAWING = "drawing"
    ECONOMICS = "economics"
    EDUCATION = "education"
    ENGINEERING = "engineering"
    FASHION = "fashion"
    FILM = "film"
    GEOGRAPHY = "geography"
    GEOLOGY = "geology"
    HISTORY = "history"
    JOURNALISM = "journalism"
    LAW = "law"
    LINGUISTICS = "linguistics"
    LITERATURE = "literature"
    MATHEMATICS = "mathematics"
    MEDICINE = "medicine"
    MUSIC = "music"
    PAINTING = "painting"
    PHILOSOPHY = "philosophy"
    PHOTOGRAPHY = "photography"
    PHYSICS = "physics"
    POLITICS = "politics"
    PSYCHOLOGY = "psychology"
    SOCIOLOGY = "sociology"
    THEATER = "theater"
    THEOLOGY = "theology"
    TRANSPORTATION = "transportation"

    def __str__(self) -> str:
        return self.value


ALL_DISCIPLINES: tuple[Discipline, ...] = tuple(Discipline)
