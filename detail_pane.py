from panel import draw_text_panel


# panel name -> (title, Entry attribute)
PANELS = {
    "simplified": ("简体", "simplified"),
    "traditional": ("繁体", "traditional"),
    "strokes": ("笔画", "strokes"),
    "pinyin": ("拼音", "pinyin"),
    "radical": ("字基", "radical"),
    "explanation": ("解释", "explanation"),
    "extra": ("更多", "extra"),
}


class DetailPane:
    def __init__(self, session):
        self.session = session

    def panel_texts(self):
        entry = self.session.selected_entry()
        texts = {}
        for name, (_, attr) in PANELS.items():
            texts[name] = getattr(entry, attr) if entry is not None else ""
        return texts

    def draw(self, layout):
        texts = self.panel_texts()
        for name, (title, _) in PANELS.items():
            win = layout.window(name)
            if win is None:
                continue
            draw_text_panel(win, title, texts[name])
