def main():
    import sys

    # Modes:
    # - default: interactive shell in the terminal
    # - --gui: windowed terminal
    argv = [a for a in sys.argv[1:] if a != "--gui"]
    if "--gui" in sys.argv[1:]:
        from taminal.ui.app import main as gui_main

        return gui_main([sys.argv[0], *argv])

    from taminal.cli_shell import interactive_main

    return interactive_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
