"""Demo data loader for a fresh Mission Control database."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.core.timezone import utc_now
from mission_control.db.models import (
    BROADCAST_LABEL,
    SYSTEM_LABEL,
    Agent,
    AgentStatus,
    Event,
    Message,
    Task,
    TaskPriority,
    TaskStatus,
)
from mission_control.db.repositories.agent_repo import AgentRepository

logger = logging.getLogger(__name__)


# name, role, emoji, status, minutes since last activity
CREW = [
    ("Zora", "Chief of Staff", "👑", AgentStatus.ACTIVE, 0),
    ("Grabber", "Lead Acquisition", "🎯", AgentStatus.ACTIVE, 0),
    ("Loki", "Graphic Design", "🎨", AgentStatus.IDLE, 30),
    ("Cody", "Development", "💻", AgentStatus.ACTIVE, 0),
    ("Zoe", "Customer Experience", "💬", AgentStatus.IDLE, 15),
]

# title, description, status, priority, assignee
TASKS = [
    ("Build Mission Control Dashboard", "Create the main dashboard for monitoring all agents",
     TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "Cody"),
    ("Design brand guidelines", "Create comprehensive brand guidelines document",
     TaskStatus.REVIEW, TaskPriority.MEDIUM, "Loki"),
    ("Outreach campaign Q1", "Plan and execute Q1 lead acquisition campaign",
     TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "Grabber"),
    ("Customer feedback analysis", "Analyze recent customer feedback and create report",
     TaskStatus.BACKLOG, TaskPriority.MEDIUM, "Zoe"),
    ("Weekly team sync agenda", "Prepare agenda for the weekly team sync meeting",
     TaskStatus.DONE, TaskPriority.LOW, "Zora"),
    ("API integration testing", "Test all API endpoints for the new integration",
     TaskStatus.BACKLOG, TaskPriority.URGENT, "Cody"),
    ("Social media graphics", "Create graphics for social media posts this week",
     TaskStatus.BACKLOG, TaskPriority.MEDIUM, "Loki"),
    ("Lead qualification criteria", "Define and document lead qualification criteria",
     TaskStatus.IN_PROGRESS, TaskPriority.HIGH, "Grabber"),
]

# agent name -> title of the task they are working on
CURRENT_TASKS = {
    "Cody": "Build Mission Control Dashboard",
    "Grabber": "Outreach campaign Q1",
}

# sender, recipient (None = broadcast), content
MESSAGES = [
    ("Zora", None, "Good morning team! Let's have a productive day."),
    ("Cody", "Zora", "Starting work on Mission Control dashboard. Will update when MVP is ready."),
    ("Grabber", "Zora", "Q1 campaign draft is ready for review. 47 new leads identified."),
    ("Loki", None, "Brand guidelines v2 is in review. Check the shared folder."),
    ("Zoe", "Zora", "Customer satisfaction score is up 12% this month!"),
    (None, None, "Daily standup reminder: 9:00 AM"),
    ("Zora", "Cody", "Priority update: API integration testing moved to urgent. Please plan accordingly."),
]

# title, description, days from today, start hour, start minute, duration minutes,
# recurrence, owner
EVENTS = [
    ("Daily Standup", "Team sync meeting", 0, 9, 0, 15, "0 9 * * 1-5", "Zora"),
    ("Sprint Review", "End of sprint review and demo", 5, 14, 0, 60, None, None),
    ("Q1 Campaign Launch", "Launch the Q1 outreach campaign", 3, 10, 0, 60, None, "Grabber"),
    ("Design Review", "Review brand guidelines with the team", 1, 13, 0, 60, None, "Loki"),
]


@dataclass
class SeedResult:
    """Counts of rows written by a seed run."""

    agents_created: int = 0
    agents_existing: int = 0
    tasks: int = 0
    messages: int = 0
    events: int = 0
    skipped: list[str] = field(default_factory=list)


class SeedService:
    """Populates the store with the demo crew, their tasks, messages and events.

    Agents are upserted by name, so re-running never duplicates them. The
    rest of the demo content is only written when every agent was newly
    created; otherwise it is skipped so repeat runs leave existing boards alone.
    """

    def __init__(self, session: AsyncSession, now: datetime | None = None):
        self.session = session
        self.now = now or utc_now()
        self.agents = AgentRepository(session)

    async def seed(self) -> SeedResult:
        """Run the seed and return what was written."""
        result = SeedResult()
        crew = await self._upsert_agents(result)

        if result.agents_existing:
            result.skipped.append("demo content (crew already present)")
            logger.info("Crew already present; skipping tasks, messages and events")
            return result

        tasks = self._add_tasks(crew, result)
        await self.session.flush()

        for agent_name, task_title in CURRENT_TASKS.items():
            crew[agent_name].current_task_id = tasks[task_title].id

        self._add_messages(crew, result)
        self._add_events(crew, result)
        await self.session.flush()

        logger.info(
            f"Seed complete: {result.agents_created} agents, {result.tasks} tasks, "
            f"{result.messages} messages, {result.events} events"
        )
        return result

    async def _upsert_agents(self, result: SeedResult) -> dict[str, Agent]:
        crew: dict[str, Agent] = {}
        for name, role, emoji, status, idle_minutes in CREW:
            agent = await self.agents.get_by_name(name)
            if agent is not None:
                result.agents_existing += 1
            else:
                agent = Agent(
                    name=name,
                    role=role,
                    emoji=emoji,
                    status=status.value,
                    last_activity_at=self.now - timedelta(minutes=idle_minutes),
                )
                self.session.add(agent)
                result.agents_created += 1
            crew[name] = agent

        await self.session.flush()
        return crew

    def _add_tasks(self, crew: dict[str, Agent], result: SeedResult) -> dict[str, Task]:
        tasks: dict[str, Task] = {}
        for title, description, status, priority, assignee in TASKS:
            task = Task(
                title=title,
                description=description,
                status=status.value,
                priority=priority.value,
                assigned_to=crew[assignee].id,
            )
            self.session.add(task)
            tasks[title] = task
            result.tasks += 1
        return tasks

    def _add_messages(self, crew: dict[str, Agent], result: SeedResult) -> None:
        for sender, recipient, content in MESSAGES:
            self.session.add(
                Message(
                    content=content,
                    from_agent_id=crew[sender].id if sender else None,
                    from_label=sender or SYSTEM_LABEL,
                    to_agent_id=crew[recipient].id if recipient else None,
                    to_label=recipient or BROADCAST_LABEL,
                )
            )
            result.messages += 1

    def _add_events(self, crew: dict[str, Agent], result: SeedResult) -> None:
        today = self.now.replace(hour=0, minute=0, second=0, microsecond=0)
        for title, description, days, hour, minute, duration, recurrence, owner in EVENTS:
            start = today + timedelta(days=days, hours=hour, minutes=minute)
            self.session.add(
                Event(
                    title=title,
                    description=description,
                    start_time=start,
                    end_time=start + timedelta(minutes=duration),
                    recurrence=recurrence,
                    assigned_agent_id=crew[owner].id if owner else None,
                )
            )
            result.events += 1
