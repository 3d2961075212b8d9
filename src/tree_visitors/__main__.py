from tree_visitors.cli import main

main(prog_name="tree-visitors")
