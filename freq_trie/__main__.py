import sys

from freq_trie.cli.cli import main

sys.exit(main())
