"""Print the three workplaces with the most completed shifts."""

from __future__ import annotations

from shiftreport.jobs.top_workplaces import main

if __name__ == "__main__":
    main()
