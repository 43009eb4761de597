# services/exporter.py
import csv
import io
from pathlib import Path
from urllib.parse import quote

CSV_HEADER = ("Date", "Check In", "Check Out", "Status", "Leave Reason")

STATUS_LABELS = {
    "present": "Present",
    "leave": "Leave",
    "holiday": "Holiday",
}


def records_to_csv(records) -> str:
    """全レコードをCSV文字列にする（区切り文字・改行を含む値はクォート）"""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for r in records:
        writer.writerow([
            r.date,
            r.check_in or "",
            r.check_out or "",
            r.status,
            r.leave_reason or "",
        ])
    return buf.getvalue()


def csv_filename(today: str) -> str:
    return f"attendance-{today}.csv"


def export_csv(records, directory: str, today: str) -> Path:
    """CSVファイルを書き出してパスを返す。レコードは変更しない"""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / csv_filename(today)
    path.write_text(records_to_csv(records), encoding="utf-8")
    return path


def build_share_text(records) -> str:
    """共有用の平文サマリー（1レコード1段落）"""
    paragraphs = []
    for r in records:
        lines = [
            f"Date: {r.date}",
            f"Check In: {r.check_in or '-'}",
            f"Check Out: {r.check_out or '-'}",
            f"Status: {STATUS_LABELS.get(r.status, r.status)}",
        ]
        if r.leave_reason:
            lines.append(f"Reason: {r.leave_reason}")
        paragraphs.append("\n".join(lines))
    return "Attendance Records\n\n" + "\n\n".join(paragraphs)


def build_share_url(text: str, base_url: str = "https://wa.me/?text=") -> str:
    return base_url + quote(text, safe="")
