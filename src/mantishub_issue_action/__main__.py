from __future__ import annotations

from mantishub_issue_action.main import main

if __name__ == "__main__":
    raise SystemExit(main())
