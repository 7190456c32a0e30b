from dataclasses import dataclass
from typing import Optional

from core.accounts import AccountService
from core.config_loader import AppConfig, load_config
from core.matcher import MatchService
from core.messaging import MessagingService
from core.points_ledger import PointsLedger
from core.ratings import RatingAggregator
from core.rewards import RewardService
from core.session_lifecycle import SessionLifecycle
from database.repository import StudyMatchRepository
from notification import NotificationEmitter, NotificationService


@dataclass
class MarketplaceServices:
    """Core services bound to one repository (one unit of work)."""
    repo: StudyMatchRepository
    emitter: NotificationEmitter
    notifications: NotificationService
    ledger: PointsLedger
    ratings: RatingAggregator
    messaging: MessagingService
    sessions: SessionLifecycle
    matches: MatchService
    accounts: AccountService
    rewards: RewardService


@dataclass
class AppContext:
    """Application context container that holds configuration and wires services.

    DB access is obtained per unit of work via marketplace_uow(); call
    services(repo) inside that scope to get services bound to it.
    """
    config: AppConfig

    @classmethod
    def build(cls, config: Optional[AppConfig] = None) -> "AppContext":
        """Build an AppContext from config (loaded from config.yaml when omitted)."""
        return cls(config=config or load_config())

    def services(self, repo: StudyMatchRepository) -> MarketplaceServices:
        emitter = NotificationEmitter(repo)
        ledger = PointsLedger(repo, emitter, self.config.points)
        messaging = MessagingService(repo, emitter)

        return MarketplaceServices(
            repo=repo,
            emitter=emitter,
            notifications=NotificationService(repo),
            ledger=ledger,
            ratings=RatingAggregator(repo, emitter, ledger),
            messaging=messaging,
            sessions=SessionLifecycle(repo, emitter, ledger, messaging),
            matches=MatchService(repo, self.config.matching),
            accounts=AccountService(repo, self.config.points),
            rewards=RewardService(repo, ledger),
        )
