from src.qa_setup.cli import main

raise SystemExit(main())
