"""Example snippets shown by the property-wrapper gallery."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

from codeblock.lang import DEFAULT_LANGUAGE, Language

SECTIONS = [
    "State Management",
    "Observable Objects",
    "Persistence",
    "Environment & Focus",
    "iOS 17+",
]


@dataclass(frozen=True)
class Snippet:
    """One gallery entry: a property wrapper and its example code."""

    name: str
    title: str
    description: str
    uses_combine: bool
    scope: str
    section: str
    code: str
    language: Language = DEFAULT_LANGUAGE

    def summary(self) -> dict[str, object]:
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "section": self.section,
            "uses_combine": self.uses_combine,
            "scope": self.scope,
        }


def _code(source: str) -> str:
    return textwrap.dedent(source).strip("\n")


CATALOG = [
    Snippet(
        name="state",
        title="@State",
        description="For simple view-local state that the view owns",
        uses_combine=False,
        scope="View-local",
        section="State Management",
        code=_code("""
            struct CounterView: View {
                @State private var counter = 0

                var body: some View {
                    VStack {
                        Text("Count: \\(counter)")
                        Button("Increment") {
                            counter += 1
                        }
                    }
                }
            }
        """),
    ),
    Snippet(
        name="binding",
        title="@Binding",
        description="For data passed from a parent view",
        uses_combine=False,
        scope="Parent to child",
        section="State Management",
        code=_code("""
            // Parent view
            struct ParentView: View {
                @State private var text = "Hello"

                var body: some View {
                    VStack {
                        Text("Value: \\(text)")
                        ChildView(text: $text)
                    }
                }
            }

            // Child view
            struct ChildView: View {
                @Binding var text: String

                var body: some View {
                    TextField("Edit text", text: $text)
                }
            }
        """),
    ),
    Snippet(
        name="stateobject",
        title="@StateObject",
        description="For when a view owns an ObservableObject",
        uses_combine=True,
        scope="View owned",
        section="State Management",
        code=_code("""
            class ViewModel: ObservableObject {
                @Published var counter = 0

                func increment() {
                    counter += 1
                }
            }

            struct CounterView: View {
                @StateObject private var viewModel = ViewModel()

                var body: some View {
                    VStack {
                        Text("Count: \\(viewModel.counter)")
                        Button("Increment") {
                            viewModel.increment()
                        }
                    }
                }
            }
        """),
    ),
    Snippet(
        name="observedobject",
        title="@ObservedObject",
        description="For observing an external ObservableObject",
        uses_combine=True,
        scope="External reference",
        section="Observable Objects",
        code=_code("""
            class FormData: ObservableObject {
                @Published var text = ""
            }

            // Parent creates and owns the object
            struct ParentView: View {
                @StateObject private var formData = FormData()

                var body: some View {
                    VStack {
                        ChildView(formData: formData)
                    }
                }
            }

            // Child receives and observes the object
            struct ChildView: View {
                @ObservedObject var formData: FormData

                var body: some View {
                    TextField("Enter text", text: $formData.text)
                }
            }
        """),
    ),
    Snippet(
        name="environmentobject",
        title="@EnvironmentObject",
        description="For globally accessible shared state",
        uses_combine=True,
        scope="App-wide",
        section="Observable Objects",
        code=_code("""
            // 1. Create the object
            class AppState: ObservableObject {
                @Published var isLoggedIn = false
            }

            // 2. Inject it into the environment
            @main
            struct MyApp: App {
                @StateObject private var appState = AppState()

                var body: some Scene {
                    WindowGroup {
                        ContentView()
                            .environmentObject(appState)
                    }
                }
            }

            // 3. Access it in any child view
            struct ProfileView: View {
                @EnvironmentObject var appState: AppState

                var body: some View {
                    if appState.isLoggedIn {
                        Text("Welcome back!")
                    } else {
                        Text("Please log in")
                    }
                }
            }
        """),
    ),
    Snippet(
        name="published",
        title="@Published",
        description="Publishes changes from ObservableObject properties",
        uses_combine=True,
        scope="Property of ObservableObject",
        section="Observable Objects",
        code=_code("""
            import Combine

            class UserSettings: ObservableObject {
                // These properties will publish changes to observers
                @Published var username = ""
                @Published var isLoggedIn = false
                @Published var theme = "light"

                // This won't trigger view updates (no @Published)
                var lastLoginDate: Date? = nil
            }
        """),
    ),
    Snippet(
        name="appstorage",
        title="@AppStorage",
        description="For persisting values in UserDefaults",
        uses_combine=False,
        scope="App-wide storage",
        section="Persistence",
        code=_code("""
            struct SettingsView: View {
                // String value with key "username"
                @AppStorage("username") private var username = ""

                // Boolean value with key "notifications_enabled"
                @AppStorage("notifications_enabled") private var notificationsEnabled = true

                // Integer value with key "theme_style"
                @AppStorage("theme_style") private var themeStyle = 0

                var body: some View {
                    Form {
                        TextField("Username", text: $username)
                        Toggle("Enable Notifications", isOn: $notificationsEnabled)
                        Picker("Theme", selection: $themeStyle) {
                            Text("Light").tag(0)
                            Text("Dark").tag(1)
                            Text("System").tag(2)
                        }
                    }
                }
            }
        """),
    ),
    Snippet(
        name="scenestorage",
        title="@SceneStorage",
        description="For persisting state across scene sessions",
        uses_combine=False,
        scope="Scene-specific storage",
        section="Persistence",
        code=_code("""
            struct NoteEditorView: View {
                // Persists note text when app is backgrounded
                @SceneStorage("current_note_text") private var noteText = ""

                // Persists the selected editor mode
                @SceneStorage("editor_mode") private var editorMode = 0

                var body: some View {
                    VStack {
                        Picker("Mode", selection: $editorMode) {
                            Text("Edit").tag(0)
                            Text("Preview").tag(1)
                        }
                        .pickerStyle(.segmented)

                        if editorMode == 0 {
                            TextEditor(text: $noteText)
                        } else {
                            ScrollView {
                                Text(noteText)
                            }
                        }
                    }
                }
            }
        """),
    ),
    Snippet(
        name="environment",
        title="@Environment",
        description="For accessing system and environment values",
        uses_combine=False,
        scope="System environment",
        section="Environment & Focus",
        code=_code("""
            struct AdaptiveView: View {
                // Read system environment values
                @Environment(\\.colorScheme) var colorScheme
                @Environment(\\.sizeCategory) var sizeCategory
                @Environment(\\.horizontalSizeClass) var horizontalSizeClass
                @Environment(\\.presentationMode) var presentationMode

                // Custom environment values
                @Environment(\\.myCustomTheme) var theme

                var body: some View {
                    VStack {
                        // Adapt to dark/light mode
                        if colorScheme == .dark {
                            DarkModeContent()
                        } else {
                            LightModeContent()
                        }

                        // Adapt to device size
                        if horizontalSizeClass == .compact {
                            CompactLayoutView()
                        } else {
                            RegularLayoutView()
                        }

                        // Dismiss the view
                        Button("Dismiss") {
                            presentationMode.wrappedValue.dismiss()
                        }
                    }
                }
            }

            // Define a custom environment key
            struct MyThemeKey: EnvironmentKey {
                static let defaultValue = "default"
            }

            // Extend EnvironmentValues
            extension EnvironmentValues {
                var myCustomTheme: String {
                    get { self[MyThemeKey.self] }
                    set { self[MyThemeKey.self] = newValue }
                }
            }
        """),
    ),
    Snippet(
        name="focusstate",
        title="@FocusState",
        description="For managing focus in forms and text fields",
        uses_combine=False,
        scope="Form field focus",
        section="Environment & Focus",
        code=_code("""
            struct LoginForm: View {
                enum Field: Hashable {
                    case email
                    case password
                }

                @State private var email = ""
                @State private var password = ""
                @FocusState private var focusedField: Field?

                var body: some View {
                    VStack {
                        TextField("Email", text: $email)
                            .focused($focusedField, equals: .email)
                            .textContentType(.emailAddress)
                            .submitLabel(.next)
                            .onSubmit {
                                focusedField = .password
                            }

                        SecureField("Password", text: $password)
                            .focused($focusedField, equals: .password)
                            .textContentType(.password)
                            .submitLabel(.done)
                            .onSubmit {
                                login()
                            }

                        Button("Log In") {
                            login()
                        }
                    }
                    .onAppear {
                        // Auto-focus the email field when view appears
                        DispatchQueue.main.asyncAfter(deadline: .now() + 0.5) {
                            self.focusedField = .email
                        }
                    }
                }

                private func login() {
                    // Clear focus when logging in
                    focusedField = nil
                    // Login logic here...
                }
            }
        """),
    ),
    Snippet(
        name="bindable",
        title="@Bindable",
        description="For binding to Observable classes (iOS 17+)",
        uses_combine=False,
        scope="Observable framework objects",
        section="iOS 17+",
        code=_code("""
            import SwiftUI
            import Observation

            // Define model with @Observable
            @Observable class TaskModel {
                var title = ""
                var notes = ""
                var priority = Priority.medium
                var isCompleted = false

                enum Priority {
                    case low, medium, high
                }
            }

            // Parent view that owns the model
            struct TaskView: View {
                @State private var task = TaskModel()

                var body: some View {
                    VStack {
                        // Pass to child view
                        TaskEditorView(task: task)

                        // Use directly in this view
                        Text("Title: \\(task.title)")
                    }
                }
            }

            // Child view that uses @Bindable
            struct TaskEditorView: View {
                @Bindable var task: TaskModel

                var body: some View {
                    Form {
                        TextField("Title", text: $task.title)
                        TextField("Notes", text: $task.notes)
                        Toggle("Completed", isOn: $task.isCompleted)
                    }
                }
            }
        """),
    ),
]
