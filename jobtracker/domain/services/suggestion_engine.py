"""
Suggestion Engine - Heuristic next-step tips from the application history.
"""

from typing import Hashable, Iterable, Optional

from jobtracker.domain.entities import Job, JobType

GENERIC_TIP = (
    "Keep applying consistently and tracking your application status. "
    "Consider updating resumes for top roles."
)
REMOTE_TIP = "You prefer remote jobs. Explore platforms like RemoteOK, WeWorkRemotely, or AngelList."
INTERNSHIP_TIP = (
    "Since you apply for internships, check Internshala, LinkedIn internships, "
    "and early-career roles."
)

JOB_TYPE_TIPS = {
    JobType.REMOTE: REMOTE_TIP,
    JobType.INTERNSHIP: INTERNSHIP_TIP,
}


class FrequencyCounter:
    """
    Counts keys and remembers the order each key was first seen.

    ``most_common`` breaks ties in favour of the earliest key, independent
    of how the underlying mapping happens to iterate.
    """

    def __init__(self) -> None:
        self._counts: dict[Hashable, int] = {}
        self._first_seen: list[Hashable] = []

    def add(self, key: Hashable) -> None:
        if key not in self._counts:
            self._counts[key] = 0
            self._first_seen.append(key)
        self._counts[key] += 1

    def count(self, key: Hashable) -> int:
        return self._counts.get(key, 0)

    def most_common(self) -> Optional[Hashable]:
        best = None
        best_count = 0
        for key in self._first_seen:
            # Strictly greater: an equal count never displaces an earlier key
            if self._counts[key] > best_count:
                best, best_count = key, self._counts[key]
        return best


def position_tip(role: str) -> str:
    return (
        f"You frequently applied for '{role}'. Consider similar roles like "
        f'"{role} Intern", "Junior {role}", or freelance work.'
    )


def suggestions(jobs: Iterable[Job]) -> list[str]:
    """
    Build the ordered list of tips for a job collection.

    Order: most applied-for position, then a job type specific tip when the
    favourite type is remote or internship, then the generic tip. An empty
    collection only gets the generic tip.
    """
    roles = FrequencyCounter()
    job_types = FrequencyCounter()
    for job in jobs:
        roles.add(job.position.lower())
        job_types.add(job.job_type)

    tips: list[str] = []

    top_role = roles.most_common()
    if top_role:
        tips.append(position_tip(top_role))

    top_type = job_types.most_common()
    if top_type in JOB_TYPE_TIPS:
        tips.append(JOB_TYPE_TIPS[top_type])

    tips.append(GENERIC_TIP)
    return tips
