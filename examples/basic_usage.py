"""
Basic cue2json usage example.

Converts one VTT file with the vtt.js parser and then refreshes a directory
of subtitles with the processing model.
"""

from cue2json import ConvertOptions, get_engine, process_directory, process_single_file


def main():
    def engine_factory():
        return get_engine("playwright", vtt_js_path="dist/vtt.min.js")

    # Parse one file and write subs.json next to it
    print("Converting subs.vtt...")
    options = ConvertOptions(source="subs.vtt", copy=True)
    if process_single_file(options, engine_factory):
        print("Wrote subs.json")

    # Refresh a whole directory, creating JSON for new VTT files too
    print("\nConverting subtitles/...")
    summary = process_directory(
        ConvertOptions(source="subtitles", process=True, create_new=True),
        engine_factory,
    )
    print(summary)
    for path, message in summary.failures:
        print(f"  {path}: {message}")


if __name__ == "__main__":
    main()
